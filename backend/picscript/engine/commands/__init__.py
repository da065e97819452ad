"""Builtin commands, one module per family."""

from __future__ import annotations

import importlib
import pkgutil


def load_commands() -> None:
    """Import all command modules so @command decorators fire."""
    for _, module_name, _ in pkgutil.iter_modules(__path__):
        importlib.import_module(f"{__name__}.{module_name}")
