"""Exit points of placed items, used as default starts for the next item."""

from __future__ import annotations

from picscript.engine.items import ArcItem, BoxItem, CurveItem, Direction, Item, LineItem
from picscript.utils.fixed import tdiv


def exit_point(base: Item | None, direction: Direction) -> tuple[int, int]:
    """Where an arc or curve with no start continues from.

    Lines, arcs and curves continue from their end; boxes from the middle of
    the side facing ``direction``.
    """
    if base is None:
        return 0, 0
    if isinstance(base, (ArcItem, CurveItem)):
        return base.x1, base.y1
    if isinstance(base, LineItem):
        return base.x + base.width, base.y + base.depth
    if isinstance(base, BoxItem):
        x, y = base.x, base.y
        if direction is Direction.NORTH:
            y += tdiv(base.depth, 2)
        elif direction is Direction.SOUTH:
            y -= tdiv(base.depth, 2)
        elif direction is Direction.EAST:
            x += tdiv(base.width, 2)
        elif direction is Direction.WEST:
            x -= tdiv(base.width, 2)
        return x, y
    return base.x, base.y
