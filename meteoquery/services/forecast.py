"""Upstream forecast retrieval and the current/hourly projections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import httpx

from meteoquery.core.errors import FetchError, NotFoundError
from meteoquery.models.views import CurrentWeather, HourlyEntry
from meteoquery.models.weather import TimeSeriesEntry, WeatherFeature, parse_feature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastSource:
    """Where and how to reach the upstream forecast endpoint."""

    url: str
    credential: str = ""
    user_agent: str = "MeteoQuery/0.1.0"

    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json", "User-Agent": self.user_agent}
        if self.credential:
            headers["Authorization"] = f"Bearer {self.credential}"
        return headers


async def fetch_forecast(
    source: ForecastSource, client: Optional[httpx.AsyncClient] = None
) -> WeatherFeature:
    """Fetch the forecast document once and validate it.

    Raises:
        FetchError: the request failed, returned an error status or non-JSON body.
        ValidationError: the body does not match the forecast document shape.
    """

    logger.debug("Fetching forecast from: %s", source.url)
    try:
        if client is None:
            async with httpx.AsyncClient() as scoped:
                response = await scoped.get(source.url, headers=source.headers())
        else:
            response = await client.get(source.url, headers=source.headers())
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        logger.warning("Failed to fetch forecast (%s): %s", source.url, exc)
        raise FetchError(f"Failed to fetch weather data: {exc}") from exc
    except ValueError as exc:
        logger.warning("Forecast response from %s is not JSON: %s", source.url, exc)
        raise FetchError(f"Failed to fetch weather data: invalid JSON ({exc})") from exc

    feature = parse_feature(payload)
    logger.debug(
        "Fetched forecast with %d entries (updated %s)",
        len(feature.properties.timeseries),
        feature.properties.meta.updated_at,
    )
    return feature


def _as_utc(now: datetime) -> datetime:
    # Naive clocks are taken to be UTC, like naive upstream timestamps.
    return now.replace(tzinfo=timezone.utc) if now.tzinfo is None else now


def upcoming_entries(feature: WeatherFeature, now: datetime) -> list[TimeSeriesEntry]:
    """Entries at or after ``now``, in delivered order."""

    now = _as_utc(now)
    return [entry for entry in feature.properties.timeseries if entry.timestamp >= now]


def current_conditions(feature: WeatherFeature, now: datetime) -> CurrentWeather:
    """Project the first entry at or after ``now`` into a flat record."""

    now = _as_utc(now)
    entry = next(
        (item for item in feature.properties.timeseries if item.timestamp >= now),
        None,
    )
    if entry is None:
        raise NotFoundError("No current weather data available")

    details = entry.data.instant.details
    return CurrentWeather(
        temperature=details.air_temperature,
        humidity=details.relative_humidity,
        wind_speed=details.wind_speed,
        wind_direction=details.wind_from_direction,
        cloud_cover=details.cloud_area_fraction,
        pressure=details.air_pressure_at_sea_level,
        next_hour_forecast=entry.data.next_1_hours,
        next_six_hours_forecast=entry.data.next_6_hours,
        next_twelve_hours_forecast=entry.data.next_12_hours,
    )


def hourly_window(feature: WeatherFeature, now: datetime, count: int = 24) -> list[HourlyEntry]:
    """Flatten up to ``count`` upcoming entries; an empty list is valid."""

    result: list[HourlyEntry] = []
    for entry in upcoming_entries(feature, now)[:count]:
        details = entry.data.instant.details
        next_hour = entry.data.next_1_hours
        precipitation = entry.precipitation
        result.append(
            HourlyEntry(
                time=entry.time,
                temperature=details.air_temperature,
                humidity=details.relative_humidity,
                wind_speed=details.wind_speed,
                wind_direction=details.wind_from_direction,
                cloud_cover=details.cloud_area_fraction,
                pressure=details.air_pressure_at_sea_level,
                precipitation=precipitation if precipitation is not None else 0.0,
                symbol=next_hour.summary.symbol_code if next_hour else "unknown",
            )
        )
    return result


__all__ = [
    "ForecastSource",
    "current_conditions",
    "fetch_forecast",
    "hourly_window",
    "upcoming_entries",
]
