"""Service metadata and liveness endpoints."""

from fastapi import APIRouter

from envelope.api.dependencies import SettingsDep
from envelope.schemas.common import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint to verify the service is running."""
    return HealthResponse(status="ok")


@router.get("/")
async def root(settings: SettingsDep) -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
