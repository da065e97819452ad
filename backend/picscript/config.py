"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    picscript_env: str = "development"
    picscript_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Interpreter defaults (fixed-point units, 1000 = one drawing unit)
    resolution: int = 1
    no_variables: bool = False
    translate_chars: bool = True
    minimum_thickness: int = 0
    allow_include: bool = False

    # Document metadata seeded as variables
    creator: str = "Unknown"
    title: str = "Unknown"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
