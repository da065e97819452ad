"""FastAPI dependency injection."""

from __future__ import annotations

from picscript.config import Settings, settings


def get_settings() -> Settings:
    return settings
