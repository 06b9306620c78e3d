"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from roster.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

# Mounted under the API prefix
index_router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


class IndexResponse(BaseModel):
    """API banner."""

    message: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
    )


@index_router.get("", response_model=IndexResponse)
async def index() -> IndexResponse:
    """Identify the API."""
    return IndexResponse(message="User Management API - FastAPI + PostgreSQL")
