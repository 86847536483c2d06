"""Liveness probe."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from promptu.config import Settings
from promptu.domain.model.item import utcnow
from promptu.util.observability import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION
    environment: str
    git_sha: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Answer without touching the database, so the probe stays cheap."""
    return HealthResponse(
        environment=settings.environment,
        git_sha=settings.git_sha,
        timestamp=utcnow(),
    )
