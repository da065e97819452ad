"""Interpreter configuration: input limits and the harness-owned scalar settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from picscript.config import Settings


@dataclass
class InterpreterConfig:
    """Controls one document read."""

    # Input limits
    input_line_size: int = 256  # bytes per physical or substituted line, newline included
    word_size: int = 256
    variable_name_size: int = 63
    macro_depth: int = 20
    include_depth: int = 20
    max_errors: int = 100

    # Global scalar settings consumed during resolution
    resolution: int = 1
    no_variables: bool = False
    translate_chars: bool = True
    minimum_thickness: int = 0
    allow_include: bool = True

    # Seeded metadata
    creator: str = "Unknown"
    title: str = "Unknown"

    @classmethod
    def from_settings(cls, settings: Settings) -> InterpreterConfig:
        return cls(
            resolution=settings.resolution,
            no_variables=settings.no_variables,
            translate_chars=settings.translate_chars,
            minimum_thickness=settings.minimum_thickness,
            allow_include=settings.allow_include,
            creator=settings.creator,
            title=settings.title,
        )
