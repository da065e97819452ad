"""Scene items: the resolved primitives a document produces.

Coordinates are fixed-point integers (1000 = one drawing unit). While a
command's options are being read, numeric fields that the user has not given
hold None; the geometry resolvers fill every field before the item is
appended to the scene.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple

import numpy as np
from numpy.typing import NDArray

from picscript.utils.geometry import cubic_offsets


class ItemKind(str, enum.Enum):
    ARC = "arc"
    BOX = "box"
    CURVE = "curve"
    LINE = "line"
    TEXT = "text"


class BoxType(str, enum.Enum):
    BOX = "box"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


class Style(str, enum.Enum):
    VISIBLE = "visible"
    INVISIBLE = "invisible"


class Justify(str, enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTRE = "centre"


class Direction(enum.IntEnum):
    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7
    CENTRE = 8
    START = 9
    END = 10
    MIDDLE = 11


COMPASS = frozenset(Direction(i) for i in range(8))

# Signs of the x and y offsets from an item's centre to each join point
OFFSET_SIGNS = {
    Direction.NORTH: (0, 1),
    Direction.NORTHEAST: (1, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTHEAST: (1, -1),
    Direction.SOUTH: (0, -1),
    Direction.SOUTHWEST: (-1, -1),
    Direction.WEST: (-1, 0),
    Direction.NORTHWEST: (-1, 1),
    Direction.CENTRE: (0, 0),
}

OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class Colour(NamedTuple):
    """RGB in thousandths (1000 = full intensity)."""

    red: int
    green: int
    blue: int

    @classmethod
    def grey(cls, level: int) -> Colour:
        return cls(level, level, level)


BLACK = Colour(0, 0, 0)
# Distinct from every real colour, including black
UNFILLED = Colour(-1000, -1000, -1000)


@dataclass
class StringFragment:
    """A quoted string attached to an item."""

    text: str
    justify: Justify = Justify.CENTRE
    rotate: int = 0  # millidegrees
    rrotate: float = 0.0  # radians
    xadjust: int = 0
    yadjust: int = 0
    font: int = 0
    colour: Colour = BLACK

    @property
    def chcount(self) -> int:
        return len(self.text)


@dataclass
class FontBinding:
    number: int
    name: str
    size: int


@dataclass(kw_only=True)
class Item:
    """Fields shared by every primitive."""

    kind: ClassVar[ItemKind]

    style: Style = Style.VISIBLE
    level: int = 0
    linedepth: int = 12000
    fontdepth: int = 6000
    thickness: int = 400
    dashed: bool = False
    dash: tuple[int, int] | None = None
    colour: Colour = BLACK
    shapefilled: Colour = UNFILLED
    x: int | None = None
    y: int | None = None
    strings: list[StringFragment] = field(default_factory=list)

    @property
    def invisible(self) -> bool:
        return self.style is Style.INVISIBLE

    @property
    def filled(self) -> bool:
        return self.shapefilled != UNFILLED


@dataclass(kw_only=True)
class ArrowMixin:
    arrow_start: bool = False
    arrow_end: bool = False
    arrow_x: int = 10000
    arrow_y: int = 10000
    arrow_filled: Colour = UNFILLED


@dataclass(kw_only=True)
class ArcItem(ArrowMixin, Item):
    kind: ClassVar[ItemKind] = ItemKind.ARC

    # Constraints as given
    radius: int | None = None
    angle: int | None = None  # millidegrees
    depth: int | None = None
    via_x: int | None = None
    via_y: int | None = None
    direction: Direction | None = None
    cw: bool = False

    # Resolved geometry: centre is (x, y)
    angle1: float = 0.0
    angle2: float = 0.0
    x0: int | None = None
    y0: int | None = None
    x1: int | None = None
    y1: int | None = None


@dataclass(kw_only=True)
class CurveItem(Item):
    kind: ClassVar[ItemKind] = ItemKind.CURVE

    cw: bool = False
    wavy: bool = False
    x0: int | None = None
    y0: int | None = None
    x1: int | None = None
    y1: int | None = None
    # Control points, relative to (x0, y0) once resolved
    cx1: int = 0
    cy1: int = 0
    cx2: int = 0
    cy2: int = 0
    cxs: int = 0
    cys: int = 0

    def points(self, ts: NDArray[np.float64]) -> list[tuple[int, int]]:
        """Absolute points on the resolved curve at each parameter in ``ts``."""
        dx = cubic_offsets(0, self.cx1, self.cx2, self.x1 - self.x0, ts)
        dy = cubic_offsets(0, self.cy1, self.cy2, self.y1 - self.y0, ts)
        return [(self.x0 + int(px), self.y0 + int(py)) for px, py in zip(dx, dy)]


@dataclass(kw_only=True)
class BoxItem(Item):
    kind: ClassVar[ItemKind] = ItemKind.BOX

    boxtype: BoxType = BoxType.BOX
    width: int = 72000
    depth: int = 36000
    joinpoint: Direction | None = None
    pointjoined: bool = False
    # Placement direction for this item only (from "up/down/left/right")
    direction: Direction | None = None

    @property
    def rectangular(self) -> bool:
        return self.boxtype is BoxType.BOX


@dataclass(kw_only=True)
class LineItem(ArrowMixin, Item):
    kind: ClassVar[ItemKind] = ItemKind.LINE

    width: int | None = None
    depth: int | None = None
    endx: int | None = None
    endy: int | None = None
    alignx: int | None = None
    aligny: int | None = None


@dataclass(kw_only=True)
class TextItem(Item):
    kind: ClassVar[ItemKind] = ItemKind.TEXT
