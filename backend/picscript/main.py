"""FastAPI app factory for the compile service."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from picscript import __version__
from picscript.config import Settings, settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.picscript_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(
        title="picscript",
        description="Line-art picture language interpreter producing resolved scene graphs",
        version=__version__,
    )

    if app_settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    count = _register_commands()
    logger.info(
        "picscript %s (%s): %d commands registered, includes %s",
        __version__,
        app_settings.picscript_env,
        count,
        "allowed" if app_settings.allow_include else "refused",
    )

    from picscript.api.router import api_router

    app.include_router(api_router)

    return app


def _register_commands() -> int:
    """Import the command modules so @command decorators fire. Returns the command count."""
    from picscript.engine.commands import load_commands
    from picscript.engine.registry import get_registry

    load_commands()
    return get_registry().count


app = create_app()
