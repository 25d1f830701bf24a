"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.config import get_settings
from shared.exceptions import CampuzwayError
from ..dependencies import get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    google_oauth: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(container=Depends(get_container)):
    """
    Readiness check endpoint.

    Probes the users table and reports whether Google sign-in is
    configured. Returns 503 when the database is unavailable.
    """
    settings = get_settings()
    google_oauth = (
        "configured"
        if settings.google_client_id and settings.google_client_secret
        else "not_configured"
    )

    try:
        container.user_repository.get_by_email(settings.super_admin_email or "ready@invalid")
        database = "connected"
    except (CampuzwayError, RuntimeError) as e:
        logger.warning(f"Readiness check failed: {e}")
        database = "unavailable"

    response = ReadinessResponse(
        status="ready" if database == "connected" else "not_ready",
        database=database,
        google_oauth=google_oauth,
    )
    if database != "connected":
        return JSONResponse(status_code=503, content=response.model_dump())
    return response
