"""MeteoQuery FastAPI application package."""

import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import api_router
from .core.config import settings
from .core.errors import FetchError, NotFoundError, QueryError, ValidationError, WeatherError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)

_STATUS_CODES: tuple[tuple[type[WeatherError], int], ...] = (
    (FetchError, 502),
    (ValidationError, 502),
    (NotFoundError, 404),
    (QueryError, 400),
)


async def weather_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = next((code for cls, code in _STATUS_CODES if isinstance(exc, cls)), 500)
    logger.warning("%s for %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def log_middleware(request: Request, call_next: Callable[[Request], Awaitable[Any]]):
    logger.info("%s %s", request.method, request.url.path)
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


def create_app() -> FastAPI:
    setup_logging()
    logger.info("Initializing %s API", settings.app_name)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.include_router(api_router, prefix=settings.api_prefix)
    app.add_exception_handler(WeatherError, weather_error_handler)
    app.middleware("http")(log_middleware)

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        """Provide a friendly landing response for the bare hostname."""

        return {
            "message": (
                f"{settings.app_name} API is online. Try POST "
                f"{settings.api_prefix}/weather/natural-language with a question."
            )
        }

    return app


app = create_app()
