"""Box, circle and ellipse placement."""

from __future__ import annotations

import math

from picscript.engine.context import InterpreterContext
from picscript.engine.items import (
    OFFSET_SIGNS,
    OPPOSITE,
    ArcItem,
    BoxItem,
    CurveItem,
    Direction,
    LineItem,
)
from picscript.utils.fixed import tdiv
from picscript.utils.geometry import corner_offsets

_QUARTER_PI = 0.25 * math.pi


def _half_extents(box: BoxItem, direction: Direction, corners: bool) -> tuple[int, int]:
    """Centre-to-join-point distances. Sides use the half sizes unless ``corners`` is set."""
    half_width = tdiv(box.width, 2)
    half_depth = tdiv(box.depth, 2)
    sx, sy = OFFSET_SIGNS[direction]
    if corners or (sx and sy):
        return corner_offsets(half_width, half_depth, box.rectangular)
    return half_width, half_depth


def _after_box(ctx: InterpreterContext, box: BoxItem, last: BoxItem) -> None:
    """Touch the previous box: the join point meets the opposite point of ``last``."""
    sx, sy = OFFSET_SIGNS[box.joinpoint]
    if box.pointjoined:
        jx, jy = ctx.joined
        xc, yc = _half_extents(box, box.joinpoint, corners=True)
        box.x = jx - sx * xc
        box.y = jy - sy * yc
        return
    xc, yc = _half_extents(box, box.joinpoint, corners=False)
    lxc, lyc = _half_extents(last, box.joinpoint, corners=False)
    box.x = last.x - sx * (lxc + xc)
    box.y = last.y - sy * (lyc + yc)


def _after_path(ctx: InterpreterContext, box: BoxItem) -> None:
    """Follow a line, arc or curve: sit on its end point, on the side it was heading."""
    base = ctx.base_item
    half_width = tdiv(box.width, 2)
    half_depth = tdiv(box.depth, 2)
    xoffset = yoffset = 0

    if isinstance(base, ArcItem):
        end_x, end_y = base.x1, base.y1
        if box.joinpoint is None:
            a2 = base.angle2
            if -_QUARTER_PI < a2 <= _QUARTER_PI:
                yoffset = half_depth
            elif _QUARTER_PI < a2 <= 3.0 * _QUARTER_PI:
                xoffset = -half_width
            elif 3.0 * _QUARTER_PI < a2 <= 5.0 * _QUARTER_PI:
                yoffset = -half_depth
            else:
                xoffset = half_width
            if base.cw:
                xoffset, yoffset = -xoffset, -yoffset
    elif isinstance(base, CurveItem):
        end_x, end_y = base.x1, base.y1
    else:
        end_x, end_y = base.x + base.width, base.y + base.depth
        if box.joinpoint is None:
            if abs(base.width) > abs(base.depth):
                xoffset = half_width if base.width >= 0 else -half_width
            else:
                yoffset = half_depth if base.depth >= 0 else -half_depth

    if box.joinpoint is not None:
        sx, sy = OFFSET_SIGNS[box.joinpoint]
        xc, yc = _half_extents(box, box.joinpoint, corners=False)
        xoffset, yoffset = -sx * xc, -sy * yc

    if box.pointjoined:
        end_x, end_y = ctx.joined
    box.x = end_x + xoffset
    box.y = end_y + yoffset


def place_box(ctx: InterpreterContext, box: BoxItem) -> None:
    """Give the box a centre if none was set explicitly."""
    if box.x is not None:
        return
    base = ctx.base_item
    if base is None:
        box.x = box.y = 0
        return

    if box.joinpoint is None and box.direction is not None:
        box.joinpoint = OPPOSITE[box.direction]

    if isinstance(base, BoxItem):
        if box.joinpoint is None:
            box.joinpoint = OPPOSITE[ctx.env.top.direction]
        _after_box(ctx, box, base)
    elif isinstance(base, (LineItem, ArcItem, CurveItem)):
        _after_path(ctx, box)
    else:
        box.x, box.y = base.x, base.y
