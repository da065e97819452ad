"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from picscript import __version__
from picscript.engine.registry import get_registry
from picscript.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        commands_registered=get_registry().count,
    )


@router.get("/commands")
async def commands() -> list[str]:
    return get_registry().names()
