"""Document variables and ``$name`` substitution."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import datetime
from email.utils import format_datetime

from picscript.engine.errors import ErrorCode

logger = logging.getLogger(__name__)

# Called with (column, code, *args) for each substitution problem
Reporter = Callable[..., None]


def _is_name_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def timestamp(now: datetime | None = None) -> str:
    """RFC 2822 style date with a numeric UTC offset."""
    now = now or datetime.now().astimezone()
    return format_datetime(now)


class VariableStore:
    """Name to text mapping, iterated in name order."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def items(self) -> Iterator[tuple[str, str]]:
        for name in sorted(self._values):
            yield name, self._values[name]

    @classmethod
    def seeded(cls, creator: str = "Unknown", title: str = "Unknown") -> VariableStore:
        store = cls()
        store.set("creator", creator)
        store.set("date", timestamp())
        store.set("title", title)
        return store


def substitute_variables(
    raw: str,
    store: VariableStore,
    report: Reporter,
    max_length: int = 256,
    name_limit: int = 63,
) -> str:
    """Expand ``$name`` and ``${name}`` in a raw line.

    ``$$`` gives a literal dollar. ``&$`` and ``&&`` are left for macro
    expansion. References that cannot be resolved are reported and left in
    the line as written.
    """
    if "$" not in raw:
        return raw

    out: list[str] = []
    length = 0
    i = 0
    n = len(raw)

    while i < n:
        if length > max_length - 2:
            report(i, ErrorCode.SUBSTITUTION_OVERFLOW)
        c = raw[i]

        if c == "&":
            if i + 1 < n and raw[i + 1] in "$&":
                out.append(raw[i:i + 2])
                length += 2
                i += 2
            else:
                out.append(c)
                length += 1
                i += 1
            continue

        if c != "$":
            out.append(c)
            length += 1
            i += 1
            continue

        if i + 1 < n and raw[i + 1] == "$":
            out.append("$")
            length += 1
            i += 2
            continue

        start = i
        i += 1
        bracketed = i < n and raw[i] == "{"
        if bracketed:
            i += 1
        name_start = i
        while i < n and _is_name_char(raw[i]):
            i += 1
        name = raw[name_start:i]
        literal = raw[start:i]

        if bracketed:
            if i < n and raw[i] == "}":
                i += 1
                literal = raw[start:i]
            else:
                report(i, ErrorCode.MISSING_BRACE, name)
                out.append(literal)
                length += len(literal)
                continue

        if not name:
            report(i, ErrorCode.EMPTY_VARIABLE_NAME)
            value = literal
        elif len(name) > name_limit:
            report(i, ErrorCode.VARIABLE_NAME_TOO_LONG)
            value = literal
        else:
            found = store.get(name)
            if found is None:
                report(i, ErrorCode.UNKNOWN_VARIABLE, name)
                value = literal
            else:
                if length + len(found) > max_length - 1:
                    report(i, ErrorCode.SUBSTITUTION_OVERFLOW_NAMED, name)
                value = found

        out.append(value)
        length += len(value)

    return "".join(out)
