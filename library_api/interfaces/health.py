"""
Service-level routes.

Provides the root banner and a simple health endpoint for
liveness/readiness probes. Returns application status and version.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from library_api.core.config import Settings
from library_api.interfaces.library.dependencies import get_settings
from library_api.interfaces.library.schemas import HealthResponse

SERVICE_BANNER = "Library Management API"

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse, summary="Service banner")
def root() -> str:
    """Identify the service."""
    return SERVICE_BANNER


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(config: Settings = Depends(get_settings)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=config.version)
