"""Drawing defaults and the push/pop environment stack."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass

from picscript.engine.items import BLACK, UNFILLED, Colour, Direction
from picscript.utils.fixed import scale

logger = logging.getLogger(__name__)


@dataclass
class EnvironmentRecord:
    """Current defaults for new items. Lengths are fixed-point."""

    arcradius: int = 36000
    arrow_x: int = 10000
    arrow_y: int = 10000
    arrowfilled: Colour = UNFILLED

    boxwidth: int = 72000
    boxdepth: int = 36000
    boxthickness: int = 500
    boxdash1: int = 7000
    boxdash2: int = 5000
    boxcolour: Colour = BLACK
    boxfilled: Colour = UNFILLED

    cirradius: int = 36000
    cirthickness: int = 400
    cirdash1: int = 7000
    cirdash2: int = 5000
    circolour: Colour = BLACK
    cirfilled: Colour = UNFILLED

    ellwidth: int = 72000
    elldepth: int = 36000
    ellthickness: int = 400
    elldash1: int = 7000
    elldash2: int = 5000
    ellcolour: Colour = BLACK
    ellfilled: Colour = UNFILLED

    linethickness: int = 400
    linedash1: int = 7000
    linedash2: int = 5000
    linecolour: Colour = BLACK
    line_hw: int = 72000
    line_vd: int = 36000

    shapefilled: Colour = UNFILLED
    textcolour: Colour = BLACK
    linedepth: int = 12000
    fontdepth: int = 6000
    setfont: int = 0

    direction: Direction = Direction.EAST
    magnification: int = 1000
    level: int = 0

    def mag(self, value: int) -> int:
        """Apply the current magnification to a raw dimension."""
        return scale(value, self.magnification)

    def magnify(self, factor: int) -> None:
        """Scale every length default, and the magnification itself, by factor/1000."""
        for name in MAGNIFIED_FIELDS:
            setattr(self, name, scale(getattr(self, name), factor))


# Lengths rescaled by "magnify"; font depth is not one of them
MAGNIFIED_FIELDS = (
    "arcradius", "arrow_x", "arrow_y",
    "boxwidth", "boxdepth", "boxthickness", "boxdash1", "boxdash2",
    "cirradius", "cirthickness", "cirdash1", "cirdash2",
    "ellwidth", "elldepth", "ellthickness", "elldash1", "elldash2",
    "linethickness", "linedash1", "linedash2", "linedepth", "line_hw", "line_vd",
    "magnification",
)


class EnvironmentStack:
    """Never empty: the base record lives for the whole document."""

    def __init__(self, base: EnvironmentRecord | None = None) -> None:
        self._stack: list[EnvironmentRecord] = [base or EnvironmentRecord()]

    @property
    def top(self) -> EnvironmentRecord:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def push(self) -> None:
        self._stack.append(copy.copy(self.top))
        logger.debug("Pushed environment (depth %d)", len(self._stack))

    def pop(self) -> bool:
        """Discard the top record. Returns False if only the base record remains."""
        if len(self._stack) == 1:
            return False
        self._stack.pop()
        logger.debug("Popped environment (depth %d)", len(self._stack))
        return True
