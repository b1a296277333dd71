"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from techstore.api.dependencies import get_catalog_store
from techstore.catalog.store import CatalogStore

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    product_count: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    from techstore.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="techstore-catalog",
        version=settings.api_version,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> ReadinessResponse:
    """Check if the catalog is loaded and ready to serve queries.

    Returns:
        Readiness status with the loaded product count.
    """
    return ReadinessResponse(status="ready", product_count=len(store))
