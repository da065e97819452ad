"""POST /api/compile: read a document and return its resolved scene or its errors."""

from __future__ import annotations

import logging
from dataclasses import replace

from fastapi import APIRouter, Depends

from picscript.config import Settings
from picscript.dependencies import get_settings
from picscript.engine.config import InterpreterConfig
from picscript.engine.reader import read_document
from picscript.models.requests import CompileRequest
from picscript.models.responses import CompileResponse, ErrorDetail
from picscript.scene.serializer import build_scene

router = APIRouter()
logger = logging.getLogger(__name__)


def _config_for(request: CompileRequest, settings: Settings) -> InterpreterConfig:
    config = InterpreterConfig.from_settings(settings)
    overrides = {
        "no_variables": request.no_variables or config.no_variables,
        "translate_chars": request.translate_chars,
    }
    if request.resolution is not None:
        overrides["resolution"] = request.resolution
    if request.creator is not None:
        overrides["creator"] = request.creator
    if request.title is not None:
        overrides["title"] = request.title
    return replace(config, **overrides)


@router.post("/compile", response_model=CompileResponse)
def compile_document(
    request: CompileRequest,
    settings: Settings = Depends(get_settings),
) -> CompileResponse:
    result = read_document(request.source, _config_for(request, settings), name=request.name)

    errors = [
        ErrorDetail(
            code=int(record.code),
            message=record.message,
            fatal=record.fatal,
            line=record.line,
            column=record.column,
        )
        for record in result.errors
    ]
    if not result.ok:
        logger.info("Compile of %s failed with %d error(s)", request.name, len(errors))
        return CompileResponse(
            ok=False,
            errors=errors,
            abandoned=result.abandoned,
            processing_time_ms=result.elapsed_ms,
        )

    return CompileResponse(
        ok=True,
        scene=build_scene(result),
        processing_time_ms=result.elapsed_ms,
    )
