"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from shareport.config import Settings
from shareport.util.clock import Clock
from shareport.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    environment: str
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], clock: FromDishka[Clock]
) -> HealthResponse:
    """Report that the process is up and which build it runs.

    Does not touch the database, so it stays green while PostgreSQL is
    unreachable.
    """
    return HealthResponse(
        status="healthy",
        timestamp=clock.now(),
        environment=settings.environment,
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
    )
