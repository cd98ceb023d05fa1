"""Service-layer utilities."""

from .formatter import describe, describe_in
from .forecast import ForecastSource, current_conditions, fetch_forecast, hourly_window
from .interpreter import interpret, primary_topic
from .projections import CompositeProjection, Projection, evaluate
from .selector import run_query

__all__ = [
    "CompositeProjection",
    "ForecastSource",
    "Projection",
    "current_conditions",
    "describe",
    "describe_in",
    "evaluate",
    "fetch_forecast",
    "hourly_window",
    "interpret",
    "primary_topic",
    "run_query",
]
