"""Liveness route."""

from datetime import datetime, timezone
from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from toolhub.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    environment: str
    git_sha: str
    checked_at: datetime


@router.get("/health", response_model=HealthResponse)
async def health(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests and which build it runs."""
    return HealthResponse(
        environment=settings.environment,
        git_sha=settings.git_sha,
        checked_at=datetime.now(timezone.utc),
    )
