"""
Health check endpoint.

Provides a liveness probe for container orchestration.
"""

from fastapi import APIRouter

from .config import settings
from .schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns service health status and configuration info"
)
async def health() -> HealthResponse:
    """
    Basic health check endpoint.

    Used by container orchestration (Kubernetes, Docker Compose)
    to verify the service is running.
    """
    return HealthResponse(
        status="ok",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        strict_validation=settings.STRICT_VALIDATION,
    )
