"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import APP_VERSION, settings
from infrastructure.database.models import OwnProfileModel
from infrastructure.database.session import get_async_session

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    profile_store: str | None = None
    profile_configured: bool | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status without touching the profile store.
    """
    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Detailed health check including the profile store.

    Reports whether the store is reachable and whether an own profile exists.
    """
    store_status = "unknown"
    configured: bool | None = None

    try:
        result = await db.execute(select(OwnProfileModel.id).limit(1))
        configured = result.scalar_one_or_none() is not None
        store_status = "healthy"
    except SQLAlchemyError as e:
        store_status = f"unhealthy: {type(e).__name__}"

    return HealthResponse(
        status="healthy" if store_status == "healthy" else "degraded",
        version=APP_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        profile_store=store_status,
        profile_configured=configured,
    )
