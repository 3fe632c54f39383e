# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from .. import __version__
from ..core.config import settings

router = APIRouter()


class HealthItem(BaseModel):
    name: str
    status: str
    message: str
    version: str | None = None


@router.get("/", response_model=list[HealthItem])
async def health() -> list[HealthItem]:
    """Report API status. There is no backing store to probe."""
    return [
        HealthItem(
            name="API",
            status="healthy",
            message=f"{settings.APP_NAME} is running",
            version=__version__,
        ),
        HealthItem(
            name="Countdown",
            status="healthy",
            message=f"Refresh interval {settings.COUNTDOWN_REFRESH_SECONDS:g}s",
        ),
    ]
