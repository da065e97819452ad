"""Character decoding: UTF-8 input lines, character entities, typographic folding.

Lines are decoded from bytes once, as they are read. Entities and the optional
quote/dash folding are expanded lazily while quoted strings are scanned, so the
decoder works on the cursor of the input stack rather than on whole lines.
"""

from __future__ import annotations

import bisect
from html.entities import name2codepoint
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from picscript.engine.source import InputStack

# Sorted entity names for binary search
_ENTITY_NAMES = sorted(name2codepoint)

_LEFT_DOUBLE_QUOTE = "\u201c"
_LEFT_SINGLE_QUOTE = "\u2018"
_RIGHT_DOUBLE_QUOTE = "\u201d"
_RIGHT_SINGLE_QUOTE = "\u2019"
_EN_DASH = "\u2013"

_SURROGATE_LOW = 0xDC80
_SURROGATE_HIGH = 0xDCFF


def decode_line(raw: bytes) -> str:
    """Decode a UTF-8 line. Bytes that are not valid UTF-8 pass through as single characters."""
    text = raw.decode("utf-8", errors="surrogateescape")
    if not any(_SURROGATE_LOW <= ord(c) <= _SURROGATE_HIGH for c in text):
        return text
    return "".join(
        chr(ord(c) - 0xDC00) if _SURROGATE_LOW <= ord(c) <= _SURROGATE_HIGH else c
        for c in text
    )


def lookup_entity(name: str) -> str | None:
    """Binary search the named entity table."""
    i = bisect.bisect_left(_ENTITY_NAMES, name)
    if i < len(_ENTITY_NAMES) and _ENTITY_NAMES[i] == name:
        return chr(name2codepoint[name])
    return None


def _numeric_entity(line: str, pos: int) -> tuple[str, int] | None:
    """Decode ``&#NNN;`` or ``&#xHHH;`` starting at ``pos`` (the ampersand)."""
    start = pos + 2
    base = 10
    digits = "0123456789"
    if start < len(line) and line[start] == "x":
        base = 16
        digits = "0123456789abcdefABCDEF"
        start += 1
    end = start
    while end < len(line) and line[end] in digits:
        end += 1
    if end == start or end >= len(line) or line[end] != ";":
        return None
    value = int(line[start:end], base)
    if value > 0x10FFFF:
        return None
    return chr(value), end


def _named_entity(line: str, pos: int) -> tuple[str, int] | None:
    """Decode ``&name;`` starting at ``pos`` (the ampersand)."""
    end = pos + 2
    while end < len(line) and line[end].isascii() and line[end].isalnum():
        end += 1
    if end >= len(line) or line[end] != ";":
        return None
    value = lookup_entity(line[pos + 1:end])
    if value is None:
        return None
    return value, end


def next_char(source: InputStack, translate: bool) -> tuple[str, bool]:
    """Advance one logical character within the current line.

    Returns the character (empty at end of line) and whether it came from an
    entity escape. The cursor is left on the last input character consumed.
    """
    source.pos += 1
    line = source.line
    pos = source.pos
    if pos >= len(line):
        return "", False
    c = line[pos]

    if c == "&" and pos + 1 < len(line):
        follow = line[pos + 1]
        decoded = None
        if follow == "#":
            decoded = _numeric_entity(line, pos)
        elif follow.isascii() and follow.isalpha():
            decoded = _named_entity(line, pos)
        if decoded is not None:
            source.pos = decoded[1]
            return decoded[0], True
        return c, False

    if not translate:
        return c, False

    doubled = pos + 1 < len(line) and line[pos + 1] == c
    if c == "`":
        if doubled:
            source.pos += 1
            return _LEFT_DOUBLE_QUOTE, False
        return _LEFT_SINGLE_QUOTE, False
    if c == "'":
        if doubled:
            source.pos += 1
            return _RIGHT_DOUBLE_QUOTE, False
        return _RIGHT_SINGLE_QUOTE, False
    if c == "-" and doubled:
        source.pos += 1
        return _EN_DASH, False
    return c, False
