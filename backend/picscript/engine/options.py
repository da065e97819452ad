"""Option tables and the generic option reader used by every drawing command.

Each command describes its options as an OptionTable of OptionSpec entries.
The reader looks the (standardized) option word up in the table and stores the
parsed value on the item with setattr, so one loop serves all item kinds.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from picscript.engine.context import InterpreterContext
from picscript.engine.errors import ErrorCode
from picscript.engine.items import Colour, Item
from picscript.engine.position import read_join, read_position
from picscript.engine.scanner import is_word_char
from picscript.engine.source import WHITESPACE


class OptionKind(enum.Enum):
    FLAG = "flag"  # set field True, second field (if any) False
    XLINE = "xline"  # horizontal line length, positive
    XNLINE = "xnline"  # horizontal line length, negative
    YLINE = "yline"
    YNLINE = "ynline"
    DIM = "dim"  # magnified dimension
    ANGLE = "angle"  # millidegrees, not magnified
    GREY = "grey"
    COLOUR = "colour"
    COLGREY = "colgrey"  # grey level or colour
    INT = "int"
    AT = "at"  # position into (field, second)
    DIR = "dir"  # constant value
    JOIN = "join"  # join point, optionally "to <position>"
    PLACE = "place"  # direction for this item, optionally "of <label>"


@dataclass(frozen=True)
class OptionSpec:
    name: str
    kind: OptionKind
    field: str
    second: str | None = None
    value: Any = None


class OptionTable:
    """Ordered option specs with lookup by name."""

    def __init__(self, *specs: OptionSpec) -> None:
        self.specs = specs
        self._by_name = {spec.name: spec for spec in specs}

    def get(self, name: str) -> OptionSpec | None:
        return self._by_name.get(name)

    def __add__(self, other: OptionTable) -> OptionTable:
        return OptionTable(*self.specs, *other.specs)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self.specs)


def _skip_separator(ctx: InterpreterContext) -> None:
    """Optional comma, then blanks, between colour components."""
    src = ctx.source
    if src.ch == ",":
        src.pos += 1
    while src.ch != "" and src.ch in WHITESPACE:
        src.pos += 1


def _read_colour(ctx: InterpreterContext, current: Colour) -> Colour:
    """Three components, each one required."""
    scan = ctx.scanner
    src = ctx.source
    red, green, blue = current
    if not scan.at_number():
        ctx.errors.report(ErrorCode.EXPECTED, "colour values")
        return current
    red = scan.read_number()
    _skip_separator(ctx)
    if not src.ch.isdigit():
        ctx.errors.report(ErrorCode.EXPECTED, "green and blue values")
    else:
        green = scan.read_number()
        _skip_separator(ctx)
        if not src.ch.isdigit():
            ctx.errors.report(ErrorCode.EXPECTED, "blue value")
        else:
            blue = scan.read_number()
    return _checked(ctx, Colour(red, green, blue))


def _read_colour_or_grey(ctx: InterpreterContext, current: Colour) -> Colour:
    """One value is a grey level; further components are optional."""
    scan = ctx.scanner
    src = ctx.source
    if not scan.at_number():
        ctx.errors.report(ErrorCode.EXPECTED, "grey level or colour values")
        return current
    red = green = blue = scan.read_number()
    _skip_separator(ctx)
    if src.ch.isdigit():
        green = scan.read_number()
        _skip_separator(ctx)
        if src.ch.isdigit():
            blue = scan.read_number()
    return _checked(ctx, Colour(red, green, blue))


def _checked(ctx: InterpreterContext, colour: Colour) -> Colour:
    if max(colour) > 1000:
        ctx.errors.report(ErrorCode.COLOUR_RANGE)
    return colour


def _apply(ctx: InterpreterContext, item: Item, spec: OptionSpec) -> None:
    src = ctx.source
    scan = ctx.scanner
    env = ctx.env.top
    kind = spec.kind

    if kind is OptionKind.FLAG:
        setattr(item, spec.field, True)
        if spec.second:
            setattr(item, spec.second, False)

    elif kind in (OptionKind.XLINE, OptionKind.XNLINE, OptionKind.YLINE, OptionKind.YNLINE):
        horizontal = kind in (OptionKind.XLINE, OptionKind.XNLINE)
        sign = -1 if kind in (OptionKind.XNLINE, OptionKind.YNLINE) else 1
        value = env.line_hw if horizontal else env.line_vd
        if src.ch.isdigit():
            value = env.mag(scan.read_number())
        setattr(item, spec.field, value * sign)
        if spec.second and getattr(item, spec.second) is None:
            setattr(item, spec.second, 0)

    elif kind is OptionKind.DIM:
        if not src.ch.isdigit():
            ctx.errors.report(ErrorCode.DIMENSION_EXPECTED)
        else:
            setattr(item, spec.field, env.mag(scan.read_number()))

    elif kind is OptionKind.ANGLE:
        if not (src.ch.isdigit() or (src.ch != "" and src.ch in "+-")):
            ctx.errors.report(ErrorCode.EXPECTED, "angle")
        else:
            setattr(item, spec.field, scan.read_number())

    elif kind is OptionKind.GREY:
        if not src.ch.isdigit():
            ctx.errors.report(ErrorCode.EXPECTED, "grey level")
        else:
            setattr(item, spec.field, Colour.grey(scan.read_number()))

    elif kind is OptionKind.COLOUR:
        setattr(item, spec.field, _read_colour(ctx, getattr(item, spec.field)))

    elif kind is OptionKind.COLGREY:
        setattr(item, spec.field, _read_colour_or_grey(ctx, getattr(item, spec.field)))

    elif kind is OptionKind.INT:
        if not scan.at_number():
            ctx.errors.report(ErrorCode.EXPECTED, "integer")
        else:
            setattr(item, spec.field, scan.read_int())

    elif kind is OptionKind.AT:
        point = read_position(ctx)
        if point is not None:
            setattr(item, spec.field, point[0])
            setattr(item, spec.second, point[1])

    elif kind is OptionKind.DIR:
        setattr(item, spec.field, spec.value)

    elif kind is OptionKind.JOIN:
        direction = read_join(ctx, positional=False, moan_if_none=True)
        if direction is not None:
            setattr(item, spec.field, direction)
            word = scan.read_word()
            if word == "to":
                point = read_position(ctx)
                if point is not None:
                    ctx.joined = point
                    setattr(item, spec.second, True)
            elif word:
                scan.push_back()
            if ctx.base_item is None:
                ctx.errors.report(ErrorCode.NOTHING_TO_JOIN)

    elif kind is OptionKind.PLACE:
        setattr(item, spec.field, spec.value)
        word = scan.read_word()
        if word == "of":
            word = scan.read_word()
            target = ctx.find_label(word)
            if target is None:
                ctx.errors.report(ErrorCode.LABEL_NOT_FOUND, word)
            else:
                ctx.base_item = target
        elif word:
            scan.push_back()


def read_options(ctx: InterpreterContext, item: Item, table: OptionTable) -> None:
    """Read option words until something that is not an option word follows."""
    src = ctx.source
    scan = ctx.scanner
    scan.pending = False

    while scan.pending or (is_word_char(src.ch) and src.ch.isalpha()):
        scan.read_word()
        spec = table.get(scan.word_std)
        if spec is None:
            ctx.errors.report(ErrorCode.UNKNOWN_OPTION, scan.word)
            # A comment spanning lines must not be read as options
            src.skip_to_semicolon()
            continue
        _apply(ctx, item, spec)
        src.skip_space()
