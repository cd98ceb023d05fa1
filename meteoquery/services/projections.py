"""Named, pure projections over a validated forecast."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Union

from meteoquery.core.errors import NotFoundError, QueryError
from meteoquery.models.weather import TimeSeriesEntry, WeatherFeature

SLICE_PREFIX = "slice:"
_SLICE_LABEL = re.compile(r"^slice:(\d+)$")


def _entry_json(entry: TimeSeriesEntry) -> dict[str, Any]:
    return entry.model_dump(mode="json", exclude_none=True)


def _series(feature: WeatherFeature) -> list[TimeSeriesEntry]:
    return feature.properties.timeseries


def temperature(feature: WeatherFeature) -> list[dict[str, Any]]:
    return [
        {"time": entry.time, "temperature": entry.data.instant.details.air_temperature}
        for entry in _series(feature)
    ]


def humidity(feature: WeatherFeature) -> list[dict[str, Any]]:
    return [
        {"time": entry.time, "humidity": entry.data.instant.details.relative_humidity}
        for entry in _series(feature)
    ]


def wind(feature: WeatherFeature) -> list[dict[str, Any]]:
    return [
        {
            "time": entry.time,
            "windSpeed": entry.data.instant.details.wind_speed,
            "windDirection": entry.data.instant.details.wind_from_direction,
        }
        for entry in _series(feature)
    ]


def precipitation(feature: WeatherFeature) -> list[dict[str, Any]]:
    return [
        {"time": entry.time, "precipitation": entry.precipitation}
        for entry in _series(feature)
        if entry.precipitation is not None and entry.precipitation > 0
    ]


def cloud_cover(feature: WeatherFeature) -> list[dict[str, Any]]:
    return [
        {"time": entry.time, "cloudCover": entry.data.instant.details.cloud_area_fraction}
        for entry in _series(feature)
    ]


def pressure(feature: WeatherFeature) -> list[dict[str, Any]]:
    return [
        {"time": entry.time, "pressure": entry.data.instant.details.air_pressure_at_sea_level}
        for entry in _series(feature)
    ]


def current(feature: WeatherFeature) -> dict[str, Any]:
    series = _series(feature)
    if not series:
        raise NotFoundError("Forecast contains no time-series entries")
    return _entry_json(series[0])


def first_entries(feature: WeatherFeature, count: int) -> list[dict[str, Any]]:
    return [_entry_json(entry) for entry in _series(feature)[:count]]


PROJECTIONS: dict[str, Callable[[WeatherFeature], Any]] = {
    "temperature": temperature,
    "humidity": humidity,
    "wind": wind,
    "precipitation": precipitation,
    "cloudCover": cloud_cover,
    "pressure": pressure,
    "current": current,
}


@dataclass(frozen=True)
class Projection:
    """One canonical projection; ``count`` is only set for slices."""

    name: str
    count: int | None = None

    @classmethod
    def slice(cls, count: int) -> "Projection":
        return cls("slice", count)

    @property
    def label(self) -> str:
        if self.name == "slice":
            return f"{SLICE_PREFIX}{self.count}"
        return self.name

    def apply(self, feature: WeatherFeature) -> Any:
        if self.name == "slice":
            return first_entries(feature, self.count or 0)
        return PROJECTIONS[self.name](feature)


@dataclass(frozen=True)
class CompositeProjection:
    """Several projections evaluated in order."""

    parts: tuple[Projection, ...]

    @property
    def label(self) -> str:
        return "[" + ", ".join(part.label for part in self.parts) + "]"

    def apply(self, feature: WeatherFeature) -> list[Any]:
        return [part.apply(feature) for part in self.parts]


ProjectionSpec = Union[Projection, CompositeProjection]


def parse_projection(label: str) -> Projection:
    """Inverse of :attr:`Projection.label`."""

    text = label.strip()
    if text in PROJECTIONS:
        return Projection(text)
    match = _SLICE_LABEL.match(text)
    if match:
        return Projection.slice(int(match.group(1)))
    raise QueryError(f"Unknown projection: {label!r}")


def is_projection_label(text: str) -> bool:
    text = text.strip()
    return text in PROJECTIONS or bool(_SLICE_LABEL.match(text))


def evaluate(spec: ProjectionSpec, feature: WeatherFeature) -> Any:
    return spec.apply(feature)


__all__ = [
    "CompositeProjection",
    "PROJECTIONS",
    "Projection",
    "ProjectionSpec",
    "evaluate",
    "is_projection_label",
    "parse_projection",
]
