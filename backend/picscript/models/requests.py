"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CompileRequest(BaseModel):
    source: str = Field(..., description="Picture document text")
    name: str = Field(default="<request>", description="Name shown in error messages and logs")
    resolution: int | None = Field(default=None, description="Coordinate rounding granularity (fixed-point)")
    no_variables: bool = Field(default=False, description="Disable $name substitution")
    translate_chars: bool = Field(default=True, description="Translate ` and ' and -- to typographic characters")
    creator: str | None = Field(default=None, description="Value of the $creator variable")
    title: str | None = Field(default=None, description="Value of the $title variable")
