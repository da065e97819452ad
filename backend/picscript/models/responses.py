"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from picscript.models.scene import SceneDocument


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands_registered: int = 0


class ErrorDetail(BaseModel):
    code: int
    message: str
    fatal: bool = False
    line: str | None = None
    column: int | None = None


class CompileResponse(BaseModel):
    ok: bool
    scene: SceneDocument | None = None
    errors: list[ErrorDetail] = Field(default_factory=list)
    abandoned: bool = False
    processing_time_ms: float = 0.0
