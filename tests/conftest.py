"""Shared fixtures: forecast payloads built around a fixed reference time."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Optional

import pytest

from meteoquery.models.weather import WeatherFeature, parse_feature

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

UNITS = {
    "air_pressure_at_sea_level": "hPa",
    "air_temperature": "celsius",
    "cloud_area_fraction": "%",
    "precipitation_amount": "mm",
    "relative_humidity": "%",
    "wind_from_direction": "degrees",
    "wind_speed": "m/s",
}


def build_entry(
    time: str,
    temperature: float = 15.0,
    humidity: float = 70.0,
    wind_speed: float = 3.5,
    wind_direction: float = 210.0,
    cloud_cover: float = 40.0,
    pressure: float = 1012.5,
    precipitation: Optional[float] = 0.0,
    symbol: str = "partlycloudy_day",
    next_hour: bool = True,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "instant": {
            "details": {
                "air_pressure_at_sea_level": pressure,
                "air_temperature": temperature,
                "cloud_area_fraction": cloud_cover,
                "relative_humidity": humidity,
                "wind_from_direction": wind_direction,
                "wind_speed": wind_speed,
            }
        }
    }
    if next_hour:
        details = {} if precipitation is None else {"precipitation_amount": precipitation}
        data["next_1_hours"] = {"summary": {"symbol_code": symbol}, "details": details}
    return {"time": time, "data": data}


def build_payload(entries: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [24.1052, 56.9496, 9]},
        "properties": {
            "meta": {"updated_at": "2024-06-01T10:12:33Z", "units": dict(UNITS)},
            "timeseries": entries,
        },
    }


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_entry() -> Callable[..., dict[str, Any]]:
    return build_entry


@pytest.fixture
def make_payload() -> Callable[[list[dict[str, Any]]], dict[str, Any]]:
    return build_payload


@pytest.fixture
def payload() -> dict[str, Any]:
    """Four hourly entries; the first is in the past, the third brings rain."""
    return build_payload(
        [
            build_entry("2024-06-01T11:00:00Z", temperature=13.2, humidity=82.0),
            build_entry("2024-06-01T12:00:00Z", temperature=14.0, humidity=78.0, symbol="cloudy"),
            build_entry("2024-06-01T13:00:00Z", temperature=14.6, precipitation=1.2, symbol="rain"),
            build_entry("2024-06-01T14:00:00Z", temperature=15.1, next_hour=False),
        ]
    )


@pytest.fixture
def feature(payload: dict[str, Any]) -> WeatherFeature:
    return parse_feature(payload)
