"""Health endpoint."""

from fastapi import APIRouter, Depends

from taskmind.api.models import HealthResponse
from taskmind.config.settings import Settings, get_settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=settings.app_version)
