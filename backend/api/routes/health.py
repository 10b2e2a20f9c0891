"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import JsonDatabase
from shared.exceptions import DatabaseError

from ..dependencies import get_database_dependency

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    collections: dict[str, str]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    db: JsonDatabase = Depends(get_database_dependency),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Loads the record store (creating it if needed) and reports
    whether the users and tasks collections are present.
    """
    try:
        collections = db.status()
    except DatabaseError:
        response.status_code = 503
        return ReadinessResponse(status="not_ready", database="unavailable", collections={})

    ready = all(state == "ready" for state in collections.values())
    if not ready:
        response.status_code = 503
    return ReadinessResponse(
        status="ready" if ready else "not_ready",
        database="connected",
        collections=collections,
    )
