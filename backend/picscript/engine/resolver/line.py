"""Line and arrow placement, plus the default anchor for text items."""

from __future__ import annotations

from picscript.engine.context import InterpreterContext
from picscript.engine.errors import ErrorCode
from picscript.engine.items import ArcItem, BoxItem, CurveItem, Direction, Item, LineItem, TextItem
from picscript.utils.fixed import tdiv


def _default_extent(ctx: InterpreterContext) -> tuple[int, int]:
    env = ctx.env.top
    direction = env.direction
    if direction is Direction.NORTH:
        return 0, env.line_vd
    if direction is Direction.SOUTH:
        return 0, -env.line_vd
    if direction is Direction.WEST:
        return -env.line_hw, 0
    return env.line_hw, 0


def _start_after_box(ctx: InterpreterContext, line: LineItem, box: BoxItem) -> tuple[int, int]:
    """Leave the box through the side the line is heading towards."""
    if line.width is None or line.depth is None:
        quadrant = ctx.env.top.direction
    elif abs(line.depth) < abs(line.width):
        quadrant = Direction.EAST if line.width > 0 else Direction.WEST
    else:
        quadrant = Direction.NORTH if line.depth > 0 else Direction.SOUTH

    if quadrant is Direction.NORTH:
        return box.x, box.y + tdiv(box.depth, 2)
    if quadrant is Direction.SOUTH:
        return box.x, box.y - tdiv(box.depth, 2)
    if quadrant is Direction.WEST:
        return box.x - tdiv(box.width, 2), box.y
    return box.x + tdiv(box.width, 2), box.y


def resolve_line(ctx: InterpreterContext, line: LineItem) -> None:
    """Fill in start point, width and depth."""
    if line.endx is None:
        # Any direction option sets both width and depth
        if line.width is None:
            line.width, line.depth = _default_extent(ctx)
    elif line.width is not None or line.depth is not None:
        ctx.errors.report(ErrorCode.LINE_OVERCONSTRAINED)

    if line.x is None:
        base = ctx.base_item
        if base is None:
            line.x = line.y = 0
        elif isinstance(base, (ArcItem, CurveItem)):
            line.x, line.y = base.x1, base.y1
        elif isinstance(base, BoxItem):
            line.x, line.y = _start_after_box(ctx, line, base)
        elif isinstance(base, LineItem):
            line.x, line.y = base.x + base.width, base.y + base.depth
        else:
            line.x, line.y = base.x, base.y

    # The start may only just be known, so an end point becomes width and depth here
    if line.endx is not None:
        line.width = line.endx - line.x
        line.depth = line.endy - line.y

    if line.alignx is not None:
        if line.width == 0:
            line.depth = line.aligny - line.y
        elif line.depth == 0:
            line.width = line.alignx - line.x
        else:
            ctx.errors.report(ErrorCode.ALIGN_SLOPING)


def text_anchor(base: Item | None) -> tuple[int, int]:
    """Default position for a text item: the middle of the base item."""
    if base is None:
        return 0, 0
    if isinstance(base, LineItem):
        return base.x + tdiv(base.width, 2), base.y + tdiv(base.depth, 2)
    return base.x, base.y


def place_text(ctx: InterpreterContext, text: TextItem) -> None:
    if text.x is None:
        text.x, text.y = text_anchor(ctx.base_item)
