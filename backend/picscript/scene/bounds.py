"""Bounding box of a resolved scene.

Text has no real metrics here: each character is taken to be half the font
size wide, which over-estimates lower-case text and under-estimates capitals.
Rotated strings are bounded by rotating that estimated box about the string's
anchor.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from shapely import affinity
from shapely.geometry import box as shapely_box

from picscript.engine.items import ArcItem, BoxItem, CurveItem, Item, ItemKind, Justify, LineItem
from picscript.scene.strings import Fonts, line_depth, string_anchor
from picscript.utils.fixed import tdiv
from picscript.utils.geometry import sample_params

logger = logging.getLogger(__name__)

_TWO_PI = 2.0 * math.pi
# Character width used when a string's font is not bound
_UNBOUND_CHAR_WIDTH = 6000


@dataclass
class BoundingBox:
    """Extrema in fixed-point units. Empty until something is added."""

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0
    empty: bool = True

    def add_point(self, x: int, y: int) -> None:
        if self.empty:
            self.x0 = self.x1 = x
            self.y0 = self.y1 = y
            self.empty = False
            return
        self.x0 = min(self.x0, x)
        self.y0 = min(self.y0, y)
        self.x1 = max(self.x1, x)
        self.y1 = max(self.y1, y)

    def add_rect(self, x: int, y: int, width: int, depth: int) -> None:
        """Add a rectangle given by one corner and a signed width and depth."""
        self.add_point(x, y)
        self.add_point(x + width, y + depth)

    def pad(self, offset: int) -> None:
        self.x0 -= offset
        self.y0 -= offset
        self.x1 += offset
        self.y1 += offset

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def depth(self) -> int:
        return self.y1 - self.y0


def _add_arc(bbox: BoundingBox, arc: ArcItem) -> None:
    a1, a2 = arc.angle1, arc.angle2
    if arc.cw:
        a1, a2 = a2, a1

    # Normalize so that a1 <= a2, 0 <= a2 <= 2pi and -2pi <= a1 <= 2pi
    while a1 > a2:
        a2 += _TWO_PI
    while a2 > _TWO_PI:
        a1 -= _TWO_PI
        a2 -= _TWO_PI
    while a2 < 0:
        a1 += _TWO_PI
        a2 += _TWO_PI

    r = arc.radius
    bx = int(r * math.cos(a1))
    by = int(r * math.sin(a1))
    cx = int(r * math.cos(a2))
    cy = int(r * math.sin(a2))

    # Extend to each axis crossing the arc passes through
    if a1 < 0:
        cx = min(cx, bx)
        bx = r
    if a1 < -math.pi or (a1 < math.pi < a2):
        bx = max(bx, cx)
        cx = -r
    if a1 < -1.5 * math.pi or (a1 < 0.5 * math.pi < a2):
        cy = min(cy, by)
        by = r
    if a1 < -0.5 * math.pi or (a1 < 1.5 * math.pi < a2):
        by = max(by, cy)
        cy = -r

    bbox.add_rect(arc.x + bx, arc.y + by, cx - bx, cy - by)


def _add_curve(bbox: BoundingBox, curve: CurveItem) -> None:
    th = curve.thickness
    for x, y in curve.points(sample_params()):
        bbox.add_point(x - th, y - th)
        bbox.add_point(x + th, y + th)


def _add_box(bbox: BoundingBox, box: BoxItem) -> None:
    bx = box.x - tdiv(box.width, 2) - tdiv(box.thickness, 2)
    by = box.y - tdiv(box.depth, 2) - tdiv(box.thickness, 2)
    bbox.add_rect(bx, by, box.width + box.thickness, box.depth + box.thickness)


def _add_line(bbox: BoundingBox, line: LineItem) -> None:
    x, y = line.x, line.y
    width, depth = line.width, line.depth
    t = line.thickness

    if width == 0:
        x -= tdiv(t, 2)
        width = t
    if depth == 0:
        y -= tdiv(t, 2)
        depth = t

    # Heads on horizontal and vertical arrows are easy to include
    if line.arrow_start or line.arrow_end:
        ww = line.arrow_y
        if line.width == 0 and ww > width:
            x = line.x - tdiv(ww, 2)
            width = ww
        elif line.depth == 0 and ww > depth:
            y = line.y - tdiv(ww, 2)
            depth = ww

    bbox.add_rect(x, y, width, depth)


def _add_strings(bbox: BoundingBox, item: Item, fonts: Fonts) -> None:
    x, y = string_anchor(item, fonts)

    for i, fragment in enumerate(item.strings):
        if i > 0:
            step = line_depth(item, fragment, fonts)
            if fragment.rotate == 0:
                y -= step
            else:
                y -= int(step * math.cos(fragment.rrotate))
                x += int(step * math.sin(fragment.rrotate))

        binding = fonts.get(fragment.font)
        depth = item.fontdepth
        if binding is not None:
            length = fragment.chcount * (binding.size // 2)
            depth = max(depth, binding.size // 2)
        else:
            length = fragment.chcount * _UNBOUND_CHAR_WIDTH

        if fragment.justify is Justify.CENTRE:
            bx = x - length // 2
        elif fragment.justify is Justify.RIGHT:
            bx = x - length
        else:
            bx = x
        # Clear the tops of capitals and the bottoms of descenders
        by = y - depth // 2
        bw, bd = length, 2 * depth

        if fragment.rotate == 0:
            bbox.add_rect(bx, by, bw, bd)
            continue

        outline = affinity.rotate(
            shapely_box(bx, by, bx + bw, by + bd),
            fragment.rrotate,
            origin=(x, y),
            use_radians=True,
        )
        minx, miny, maxx, maxy = outline.bounds
        bbox.add_point(math.floor(minx), math.floor(miny))
        bbox.add_point(math.ceil(maxx), math.ceil(maxy))


_ADDERS = {
    ItemKind.ARC: _add_arc,
    ItemKind.CURVE: _add_curve,
    ItemKind.BOX: _add_box,
    ItemKind.LINE: _add_line,
}


def find_bounds(items, fonts: Fonts, frame_offset: int | None = None) -> BoundingBox:
    """Bounding box of ``items``, padded by ``frame_offset`` when a frame is drawn.

    Invisible items count only when they carry strings or a fill.
    """
    bbox = BoundingBox()
    for item in items:
        if item.invisible and not item.strings and not item.filled:
            continue
        adder = _ADDERS.get(item.kind)
        if adder is not None:
            adder(bbox, item)
        if item.strings:
            _add_strings(bbox, item, fonts)

    if frame_offset is not None and not bbox.empty:
        bbox.pad(frame_offset)
    logger.debug("Bounding box (%d, %d) to (%d, %d)", bbox.x0, bbox.y0, bbox.x1, bbox.y1)
    return bbox
