"""API dependencies."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timezone

import httpx
from fastapi import Depends

from meteoquery.core.config import settings
from meteoquery.models.weather import WeatherFeature
from meteoquery.services.forecast import ForecastSource, fetch_forecast


async def get_client() -> AsyncIterator[httpx.AsyncClient]:
    """Yield a scoped HTTP client for the upstream call."""
    async with httpx.AsyncClient() as client:
        yield client


def get_forecast_source() -> ForecastSource:
    return ForecastSource(
        url=settings.weather_api_url,
        credential=settings.weather_api_key,
        user_agent=settings.weather_user_agent,
    )


def get_now() -> datetime:
    return datetime.now(timezone.utc)


async def get_forecast(
    source: ForecastSource = Depends(get_forecast_source),
    client: httpx.AsyncClient = Depends(get_client),
) -> WeatherFeature:
    """Fetch and validate a fresh forecast for every request."""
    return await fetch_forecast(source, client)
