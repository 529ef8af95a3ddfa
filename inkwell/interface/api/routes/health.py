"""Liveness route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from inkwell.application.usecase.base import BaseResponse
from inkwell.config import Settings
from inkwell.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseResponse):
    """Service status with the deployed build."""

    status: str = "healthy"
    timestamp: datetime
    version: str = SERVICE_VERSION
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up. Does not touch the database."""
    return HealthResponse(timestamp=datetime.now(timezone.utc), git_sha=settings.git_sha)
