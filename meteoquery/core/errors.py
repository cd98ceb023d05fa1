"""
Exceptions raised while fetching, validating and querying forecasts.
"""


class WeatherError(Exception):
    """Base exception for forecast-related errors."""

    pass


class FetchError(WeatherError):
    """The upstream forecast endpoint could not be reached or read."""

    pass


class ValidationError(WeatherError):
    """The upstream payload does not match the expected document shape."""

    pass


class NotFoundError(WeatherError):
    """No time-series entry qualifies for the request."""

    pass


class QueryError(WeatherError):
    """A query could not be interpreted or evaluated."""

    pass
