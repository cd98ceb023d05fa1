"""Forecast document models and derived views."""

from .views import (
    CurrentWeather,
    HourlyEntry,
    HumanReadable,
    NaturalLanguageResponse,
    QueryRequest,
)
from .weather import TimeSeriesEntry, WeatherFeature, parse_feature

__all__ = [
    "CurrentWeather",
    "HourlyEntry",
    "HumanReadable",
    "NaturalLanguageResponse",
    "QueryRequest",
    "TimeSeriesEntry",
    "WeatherFeature",
    "parse_feature",
]
