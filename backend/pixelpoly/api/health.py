"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pixelpoly.config import Settings
from pixelpoly.dependencies import get_settings
from pixelpoly.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        environment=settings.pixelpoly_env,
        max_grid_cells=settings.max_grid_cells,
    )
