"""Forecast operations: current, hourly, raw query and natural-language query."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, Query

from meteoquery.api.deps import get_forecast, get_now
from meteoquery.core.errors import QueryError, WeatherError
from meteoquery.models.views import (
    CurrentWeather,
    HourlyEntry,
    NaturalLanguageResponse,
    QueryRequest,
)
from meteoquery.models.weather import WeatherFeature
from meteoquery.services.formatter import describe
from meteoquery.services.forecast import current_conditions, hourly_window
from meteoquery.services.interpreter import EXAMPLE_QUERIES, interpret
from meteoquery.services.projections import evaluate
from meteoquery.services.selector import run_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weather", tags=["weather"])

DEFAULT_HOURS = 24
MAX_HOURS = 48


@router.get("/current", response_model=CurrentWeather, operation_id="getCurrentWeather")
async def get_current_weather(
    feature: WeatherFeature = Depends(get_forecast),
    now: datetime = Depends(get_now),
) -> CurrentWeather:
    return current_conditions(feature, now)


@router.get("/hourly", response_model=list[HourlyEntry], operation_id="getHourlyForecast")
async def get_hourly_forecast(
    hours: int = Query(DEFAULT_HOURS, ge=1, le=MAX_HOURS),
    feature: WeatherFeature = Depends(get_forecast),
    now: datetime = Depends(get_now),
) -> list[HourlyEntry]:
    return hourly_window(feature, now, hours)


@router.post("/query", operation_id="queryWeatherData")
async def query_weather_data(
    payload: QueryRequest,
    feature: WeatherFeature = Depends(get_forecast),
) -> Any:
    """Evaluate a selector query (see :mod:`meteoquery.services.selector`)."""
    try:
        return run_query(payload.query, feature)
    except QueryError as exc:
        raise QueryError(f"Invalid query: {exc}") from exc


@router.post(
    "/natural-language",
    response_model=NaturalLanguageResponse,
    operation_id="naturalLanguageQuery",
)
async def natural_language_query(
    payload: QueryRequest,
    feature: WeatherFeature = Depends(get_forecast),
) -> NaturalLanguageResponse:
    try:
        spec = interpret(payload.query)
        result = evaluate(spec, feature)
    except WeatherError as exc:
        raise QueryError(f"Failed to process natural language query: {exc}") from exc

    logger.info("Answered %r with %s", payload.query, spec.label)
    return NaturalLanguageResponse(
        original_query=payload.query,
        interpreted_query=spec.label,
        result=result,
        human_readable=describe(payload.query, result),
    )


@router.get("/examples", summary="Example natural-language queries")
async def example_queries() -> dict[str, list[str]]:
    return EXAMPLE_QUERIES


__all__ = ["router"]
