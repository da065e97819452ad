"""Join words and position expressions.

A position is either an absolute vector ``(x,y)`` or a point on an existing
item: ``[fraction] <join word> [of <label>] [plus (dx,dy)]``. The join point
depends on the kind of item it is applied to.
"""

from __future__ import annotations

import math

import numpy as np

from picscript.engine.context import InterpreterContext
from picscript.engine.errors import ErrorCode
from picscript.engine.items import (
    COMPASS,
    OFFSET_SIGNS,
    ArcItem,
    BoxItem,
    CurveItem,
    Direction,
    Item,
    LineItem,
)
from picscript.utils.fixed import tdiv
from picscript.utils.geometry import corner_offsets

Point = tuple[int, int]

_CORNER_WORDS = {"right": 1, "left": -1}


def _read_corner(ctx: InterpreterContext, vertical: Direction) -> Direction:
    """After top/bottom: an optional left/right, written apart or hyphenated."""
    if ctx.source.ch == "-":
        ctx.source.advance()
    word = ctx.scanner.read_word()
    side = _CORNER_WORDS.get(word)
    if side is None:
        ctx.scanner.push_back()
        return vertical
    if vertical is Direction.NORTH:
        return Direction.NORTHEAST if side > 0 else Direction.NORTHWEST
    return Direction.SOUTHEAST if side > 0 else Direction.SOUTHWEST


def read_join(ctx: InterpreterContext, positional: bool, moan_if_none: bool) -> Direction | None:
    """Read a join word. Returns None (pushing the word back unless moaning) if there is none."""
    word = ctx.scanner.read_word()
    if not word:
        ctx.errors.report(ErrorCode.EXPECTED, "word")
        return Direction.NORTH

    direction: Direction | None = None
    if word == "top":
        direction = _read_corner(ctx, Direction.NORTH)
    elif word == "bottom":
        direction = _read_corner(ctx, Direction.SOUTH)
    elif word == "left":
        direction = Direction.WEST
    elif word == "right":
        direction = Direction.EAST
    elif word in ("centre", "center"):
        direction = Direction.CENTRE
    elif positional:
        direction = {
            "start": Direction.START,
            "end": Direction.END,
            "middle": Direction.MIDDLE,
        }.get(word)

    if direction is None:
        if moan_if_none:
            ctx.errors.report(
                ErrorCode.EXPECTED, "top, bottom, left, right, centre, start, end, or middle"
            )
        else:
            ctx.scanner.push_back()
    return direction


def _arc_point(ctx: InterpreterContext, arc: ArcItem, direction: Direction, fraction: int) -> tuple[Point, int]:
    if direction in COMPASS:
        ctx.errors.report(ErrorCode.BAD_POSITION, "arc")
        return (0, 0), fraction
    if direction is Direction.CENTRE:
        return (arc.x, arc.y), fraction
    if direction is Direction.MIDDLE:
        fraction = 500
    if fraction:
        if direction is Direction.END:
            fraction = 1000 - fraction
        angle = arc.angle1 + fraction * (arc.angle2 - arc.angle1) / 1000.0
        return (
            arc.x + int(arc.radius * math.cos(angle)),
            arc.y + int(arc.radius * math.sin(angle)),
        ), 0
    if direction is Direction.START:
        return (arc.x0, arc.y0), 0
    return (arc.x1, arc.y1), 0


def _curve_point(ctx: InterpreterContext, curve: CurveItem, direction: Direction, fraction: int) -> tuple[Point, int]:
    if direction in COMPASS or direction is Direction.CENTRE:
        ctx.errors.report(ErrorCode.BAD_POSITION, "curve")
        return (0, 0), fraction
    if direction is Direction.MIDDLE:
        fraction = 500
    if fraction:
        if direction is Direction.END:
            fraction = 1000 - fraction
        return curve.points(np.array([fraction / 1000.0]))[0], 0
    if direction is Direction.START:
        return (curve.x0, curve.y0), 0
    return (curve.x1, curve.y1), 0


def _box_point(ctx: InterpreterContext, box: BoxItem, direction: Direction, fraction: int) -> tuple[Point, int]:
    if direction in (Direction.START, Direction.END, Direction.MIDDLE):
        ctx.errors.report(ErrorCode.BAD_POSITION, "box")
        return (0, 0), fraction
    if direction is Direction.CENTRE:
        return (box.x, box.y), fraction

    half_width = tdiv(box.width, 2)
    half_depth = tdiv(box.depth, 2)
    sx, sy = OFFSET_SIGNS[direction]
    if sx == 0:
        x = box.x
        if fraction:
            x += tdiv((fraction - 500) * box.width, 1000)
        return (x, box.y + sy * half_depth), 0
    if sy == 0:
        y = box.y
        if fraction:
            y += tdiv((fraction - 500) * box.depth, 1000)
        return (box.x + sx * half_width, y), 0

    cx, cy = corner_offsets(half_width, half_depth, box.rectangular)
    return (box.x + sx * cx, box.y + sy * cy), fraction


def _line_point(ctx: InterpreterContext, line: LineItem, direction: Direction, fraction: int) -> tuple[Point, int]:
    end = (line.x + line.width, line.y + line.depth)
    if direction in COMPASS or direction is Direction.CENTRE:
        ctx.errors.report(ErrorCode.BAD_POSITION, "line")
        return end, fraction
    if direction is Direction.MIDDLE:
        return (line.x + tdiv(line.width, 2), line.y + tdiv(line.depth, 2)), fraction
    dx = tdiv(fraction * line.width, 1000)
    dy = tdiv(fraction * line.depth, 1000)
    if direction is Direction.START:
        return (line.x + dx, line.y + dy), 0
    return (end[0] - dx, end[1] - dy), 0


def join_point(ctx: InterpreterContext, item: Item, direction: Direction, fraction: int) -> tuple[Point, int]:
    """Point on ``item`` for a join word. Also returns any fraction left unused."""
    if isinstance(item, ArcItem):
        return _arc_point(ctx, item, direction, fraction)
    if isinstance(item, CurveItem):
        return _curve_point(ctx, item, direction, fraction)
    if isinstance(item, BoxItem):
        return _box_point(ctx, item, direction, fraction)
    if isinstance(item, LineItem):
        return _line_point(ctx, item, direction, fraction)
    return (item.x, item.y), fraction


def _read_fraction(ctx: InterpreterContext) -> int | None:
    src = ctx.source
    fraction = ctx.scanner.read_number()
    if src.ch == "/":
        src.advance()
        if not src.ch.isdigit():
            ctx.errors.report(ErrorCode.EXPECTED, "number")
            return None
        divisor = ctx.scanner.read_number()
        if divisor == 0:
            ctx.errors.report(ErrorCode.BAD_FRACTION)
            return None
        fraction = tdiv(fraction * 1000, divisor)
    src.skip_space()
    return fraction


def read_position(ctx: InterpreterContext) -> Point | None:
    """Read a position.

    Returns None if no point was set. That includes a bare label, which
    instead makes the labelled item the base for the current command.
    """
    src = ctx.source
    scan = ctx.scanner
    if src.ch == "(":
        return scan.read_vector()

    fraction = 0
    if src.ch.isdigit():
        value = _read_fraction(ctx)
        if value is None:
            return None
        fraction = value

    direction = read_join(ctx, positional=True, moan_if_none=False)
    if direction is None:
        word = scan.read_word()
        relative = ctx.find_label(word)
        if relative is not None:
            ctx.base_item = relative
        else:
            ctx.errors.report(
                ErrorCode.EXPECTED,
                "top, bottom, left, right, centre, start, end, middle, or label",
            )
        return None

    relative = ctx.base_item
    word = scan.read_word()
    if word == "of":
        word = scan.read_word()
        relative = ctx.find_label(word)
        if relative is None:
            ctx.errors.report(ErrorCode.LABEL_NOT_FOUND, word)
            return None
    elif word:
        scan.push_back()

    # After "goto *" or before the first item there is nothing to be relative to
    if relative is None:
        ctx.errors.report(ErrorCode.NO_PREVIOUS_ITEM)
        return None

    (x, y), fraction = join_point(ctx, relative, direction, fraction)
    if fraction != 0:
        ctx.errors.report(ErrorCode.BAD_FRACTION)
        return None

    word = scan.read_word()
    if word == "plus":
        if src.ch == "(":
            dx, dy = scan.read_vector()
            x += dx
            y += dy
        else:
            ctx.errors.report(ErrorCode.EXPECTED, "Parenthesized vector (x,y)")
    elif word:
        scan.push_back()
    return x, y
