"""Health check endpoints.

Provides liveness and readiness probes for load balancers.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from cookbook.api.dependencies import get_app_settings
from cookbook.core.config import Settings  # noqa: TC001


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Health status", examples=["healthy"])
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(HealthResponse):
    """Readiness check response with dependency status."""

    dependencies: dict[str, str] = Field(
        default_factory=dict,
        description="Status of external dependencies",
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Check if the service is alive. Does not check dependencies."""
    return HealthResponse(
        status="healthy",
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
)
async def readiness_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ReadinessResponse:
    """Check if the catalog store is reachable and the recipe source is set up."""
    dependencies: dict[str, str] = {}

    store = getattr(request.app.state, "catalog_store", None)
    if store is None:
        dependencies["catalog"] = "not_initialized"
    else:
        dependencies["catalog"] = "healthy" if await store.ping() else "unhealthy"

    client = getattr(request.app.state, "mealdb_client", None)
    dependencies["mealdb"] = "configured" if client is not None else "not_initialized"

    all_ready = all(s in ("healthy", "configured") for s in dependencies.values())

    return ReadinessResponse(
        status="ready" if all_ready else "degraded",
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies=dependencies,
    )
