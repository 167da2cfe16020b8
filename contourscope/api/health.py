"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from contourscope.config import Settings
from contourscope.dependencies import get_settings
from contourscope.engine.registry import get_registry
from contourscope.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        environment=settings.contourscope_env,
        transforms_registered=get_registry().count,
    )
