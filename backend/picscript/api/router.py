"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from picscript.api import compile as compile_endpoint
from picscript.api import health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(compile_endpoint.router)
