"""Upstream forecast document models and the schema validator."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from meteoquery.core.errors import ValidationError


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class _Document(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Units(_Document):
    air_pressure_at_sea_level: StrictStr
    air_temperature: StrictStr
    cloud_area_fraction: StrictStr
    precipitation_amount: StrictStr
    relative_humidity: StrictStr
    wind_from_direction: StrictStr
    wind_speed: StrictStr


class Meta(_Document):
    updated_at: StrictStr
    units: Units


class InstantDetails(_Document):
    air_pressure_at_sea_level: StrictFloat
    air_temperature: StrictFloat
    cloud_area_fraction: StrictFloat
    relative_humidity: StrictFloat
    wind_from_direction: StrictFloat
    wind_speed: StrictFloat


class Instant(_Document):
    details: InstantDetails


class Summary(_Document):
    symbol_code: StrictStr


class ForecastDetails(_Document):
    precipitation_amount: Optional[StrictFloat] = None


class ForecastPeriod(_Document):
    summary: Summary
    details: ForecastDetails


class TimeSeriesData(_Document):
    instant: Instant
    next_1_hours: Optional[ForecastPeriod] = None
    next_6_hours: Optional[ForecastPeriod] = None
    next_12_hours: Optional[ForecastPeriod] = None


class TimeSeriesEntry(_Document):
    time: StrictStr
    data: TimeSeriesData

    @field_validator("time")
    @classmethod
    def _check_iso_time(cls, value: str) -> str:
        try:
            parse_timestamp(value)
        except ValueError as exc:
            raise ValueError(f"not an ISO-8601 timestamp: {value!r}") from exc
        return value

    @property
    def timestamp(self) -> datetime:
        return parse_timestamp(self.time)

    @property
    def precipitation(self) -> float | None:
        """Precipitation forecast for the following hour, if any."""

        if self.data.next_1_hours is None:
            return None
        return self.data.next_1_hours.details.precipitation_amount


class Geometry(_Document):
    type: Literal["Point"]
    coordinates: tuple[StrictFloat, StrictFloat, StrictFloat]


class Properties(_Document):
    meta: Meta
    timeseries: list[TimeSeriesEntry]


class WeatherFeature(_Document):
    """One forecast pull for a single point."""

    type: Literal["Feature"]
    geometry: Geometry
    properties: Properties

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def parse_feature(raw: Any) -> WeatherFeature:
    """Validate a decoded JSON document into a :class:`WeatherFeature`.

    Raises:
        ValidationError: naming the first structural mismatch found.
    """

    try:
        return WeatherFeature.model_validate(raw)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise ValidationError(f"{location}: {first['msg']}") from exc


__all__ = [
    "ForecastDetails",
    "ForecastPeriod",
    "Geometry",
    "Instant",
    "InstantDetails",
    "Meta",
    "Properties",
    "Summary",
    "TimeSeriesData",
    "TimeSeriesEntry",
    "Units",
    "WeatherFeature",
    "parse_feature",
    "parse_timestamp",
]
