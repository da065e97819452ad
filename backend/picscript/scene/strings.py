"""String anchoring: where the stack of strings attached to an item is drawn."""

from __future__ import annotations

import math

from picscript.engine.items import FontBinding, Item, ItemKind, StringFragment
from picscript.utils.fixed import tdiv

Fonts = dict[int, FontBinding]

DEFAULT_LINE_DEPTH = 12000
DEFAULT_FONT_DEPTH = 6000


def line_depth(item: Item, fragment: StringFragment, fonts: Fonts) -> int:
    """Greater of the item's line depth and the size of the fragment's font."""
    binding = fonts.get(fragment.font)
    size = binding.size if binding is not None else DEFAULT_LINE_DEPTH
    return max(size, item.linedepth)


def font_depth(item: Item, fragment: StringFragment, fonts: Fonts) -> int:
    """Greater of the item's font depth and half the size of the fragment's font."""
    binding = fonts.get(fragment.font)
    depth = binding.size // 2 if binding is not None else DEFAULT_FONT_DEPTH
    return max(depth, item.fontdepth)


def string_anchor(item: Item, fonts: Fonts) -> tuple[int, int]:
    """Anchor of the first string. Later strings stack downwards by their line depth.

    The anchor is computed for the middle string of the stack, then moved up
    by the line depths of the strings above it.
    """
    strings = item.strings
    n = len(strings)
    if n == 0:
        return item.x, item.y

    mid = max((n + 1) // 2 - 1, 0)
    middle = strings[mid]
    x, y = item.x, item.y

    if item.kind is ItemKind.LINE:
        x += tdiv(item.width, 2)
        if item.depth == 0:
            if n == 1:
                y += 2000
            else:
                y += line_depth(item, middle, fonts) // 2 - font_depth(item, middle, fonts) // 2
        else:
            # Beside a sloping or vertical line, a little way off
            x += 3000
            y += tdiv(item.depth, 2) - font_depth(item, middle, fonts) // 2
            if n % 2 == 0:
                y += line_depth(item, middle, fonts) // 2

    elif item.kind is ItemKind.ARC:
        radius = float(item.radius)
        angle = (item.angle1 + item.angle2) / 2.0
        if item.angle1 > item.angle2:
            angle += math.pi
        if item.cw:
            angle += math.pi
        x += int(radius * math.cos(angle)) + 6000
        y += int(radius * math.sin(angle))
        angle = abs(angle)
        if 3.0 * math.pi / 8.0 < angle < 5.0 * math.pi / 8.0:
            y += font_depth(item, middle, fonts) // 2 + 2000
        if n % 2 == 1:
            y -= font_depth(item, middle, fonts) // 2

    elif item.kind is ItemKind.CURVE:
        pass

    else:
        y -= font_depth(item, middle, fonts) // 2
        if n % 2 == 0:
            y += line_depth(item, middle, fonts) // 2

    for following in strings[1:mid + 1]:
        y += line_depth(item, following, fonts)

    return x, y
