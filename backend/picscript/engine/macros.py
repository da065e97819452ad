"""Macro definitions and invocations."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_ARG_REF_RE = re.compile(r"&(&|\$|\d+)")


def max_argument(text: str) -> int:
    """Highest ``&N`` reference in a body line."""
    highest = 0
    for m in _ARG_REF_RE.finditer(text):
        token = m.group(1)
        if token.isdigit():
            highest = max(highest, int(token))
    return highest


@dataclass
class Macro:
    name: str
    lines: list[str] = field(default_factory=list)
    argcount: int = 0

    def add_line(self, text: str) -> None:
        self.lines.append(text)
        self.argcount = max(self.argcount, max_argument(text))


@dataclass
class MacroInvocation:
    """An active call: the macro, its bound arguments and the next body line."""

    macro: Macro
    args: list[str] = field(default_factory=list)
    next_line: int = 0

    @property
    def exhausted(self) -> bool:
        return self.next_line >= len(self.macro.lines)

    def pop_line(self, macro_id: int) -> str:
        """Return the next body line with ``&N``, ``&$`` and ``&&`` expanded."""
        text = self.macro.lines[self.next_line]
        self.next_line += 1

        def _expand(m: re.Match[str]) -> str:
            token = m.group(1)
            if token == "&":
                return "&"
            if token == "$":
                return str(macro_id)
            n = int(token)
            if 1 <= n <= len(self.args):
                return self.args[n - 1]
            if n == 0 and self.args:
                return self.args[0]
            return ""

        return _ARG_REF_RE.sub(_expand, text)


class MacroStore:
    """Macros by name. A later definition replaces an earlier one."""

    def __init__(self) -> None:
        self._macros: dict[str, Macro] = {}

    def define(self, macro: Macro) -> None:
        if macro.name in self._macros:
            logger.debug("Redefining macro %s", macro.name)
        self._macros[macro.name] = macro
        logger.info("Defined macro %s (%d lines, %d args)", macro.name, len(macro.lines), macro.argcount)

    def get(self, name: str) -> Macro | None:
        return self._macros.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._macros

    def __len__(self) -> int:
        return len(self._macros)
