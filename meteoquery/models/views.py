"""Derived views and request/response payloads for the API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from meteoquery.models.weather import ForecastPeriod

MAX_QUERY_LENGTH = 500


class _View(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CurrentWeather(_View):
    temperature: float
    humidity: float
    wind_speed: float
    wind_direction: float
    cloud_cover: float
    pressure: float
    next_hour_forecast: ForecastPeriod | None = None
    next_six_hours_forecast: ForecastPeriod | None = None
    next_twelve_hours_forecast: ForecastPeriod | None = None


class HourlyEntry(_View):
    time: str
    temperature: float
    humidity: float
    wind_speed: float
    wind_direction: float
    cloud_cover: float
    pressure: float
    precipitation: float = 0.0
    symbol: str = "unknown"


class QueryRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=MAX_QUERY_LENGTH)


class HumanReadable(BaseModel):
    en: str
    lv: str


class NaturalLanguageResponse(_View):
    original_query: str
    interpreted_query: str
    result: Any = None
    human_readable: HumanReadable


__all__ = [
    "CurrentWeather",
    "HourlyEntry",
    "HumanReadable",
    "MAX_QUERY_LENGTH",
    "NaturalLanguageResponse",
    "QueryRequest",
]
