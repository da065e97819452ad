"""Command registry: every builtin command is a function registered via decorator.

Usage:
    @command("box", arg1=Style.VISIBLE, arg2=BoxType.BOX)
    @command("ibox", arg1=Style.INVISIBLE, arg2=BoxType.BOX)
    def c_box(ctx: InterpreterContext, spec: CommandSpec) -> None:
        ...

Stacking the decorator registers the same function under several names, each
with its own pair of variant arguments. Adding a command means adding one
decorated function; the reader dispatches on the standardized command word.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from picscript.engine.context import InterpreterContext

logger = logging.getLogger(__name__)


@dataclass
class CommandSpec:
    name: str
    fn: Callable[["InterpreterContext", "CommandSpec"], None]
    arg1: Any = None
    arg2: Any = None


class CommandRegistry:
    """Singleton registry of builtin commands."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.name in self._commands:
            raise ValueError(f"Duplicate command name: {spec.name}")
        self._commands[spec.name] = spec
        logger.debug("Registered command %s -> %s", spec.name, spec.fn.__name__)

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def names(self) -> list[str]:
        return sorted(self._commands)

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def command(name: str, *, arg1: Any = None, arg2: Any = None):
    """Decorator to register a command function under ``name``."""

    def decorator(fn: Callable[["InterpreterContext", CommandSpec], None]):
        _registry.register(CommandSpec(name=name, fn=fn, arg1=arg1, arg2=arg2))
        return fn

    return decorator
