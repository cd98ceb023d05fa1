"""Root API routers."""

from fastapi import APIRouter

from meteoquery.core.config import settings

health_router = APIRouter(tags=["system"])


@health_router.get("/health", summary="Service health probe")
async def healthcheck() -> dict[str, str]:
    """Heartbeat; does not contact the upstream forecast provider."""

    return {"status": "ok", "service": settings.app_name, "version": settings.app_version}
