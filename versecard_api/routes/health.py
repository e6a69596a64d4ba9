"""
Health check endpoints for monitoring and orchestration.

Provides:
- /health - Full health check with version info
- /health/live - Kubernetes liveness probe
- /health/ready - Kubernetes readiness probe
"""

from datetime import datetime
from typing import Dict, Any

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from versecard.settings import get_settings

from ..dependencies import get_container
from ..factories import ServiceContainer

router = APIRouter(tags=["Health"])
settings = get_settings()


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    environment: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""
    status: str
    checks: Dict[str, Any]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Full health check endpoint.

    Returns application status, version, and environment.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.utcnow().isoformat() + "Z",
        version=settings.app_version,
        environment=settings.environment.value,
    )


@router.get("/health/live")
async def liveness() -> Dict[str, str]:
    """
    Kubernetes liveness probe.

    Returns 200 if the application is alive.
    """
    return {"status": "alive"}


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    services: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Kubernetes readiness probe.

    Ready when at least one verse is loaded.
    """
    verse_count = len(services.verses)
    checks = {
        "verses": {"status": "ready" if verse_count else "not_ready", "count": verse_count},
        "formatting_cache": {"status": "ready", "entries": len(services.cache)},
    }
    all_ready = verse_count > 0

    if not all_ready:
        response.status_code = 503

    return ReadinessResponse(
        status="ready" if all_ready else "not_ready",
        checks=checks,
    )
