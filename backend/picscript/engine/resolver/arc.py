"""Arc placement.

An arc is fixed by its centre, radius and start/end angles. What the user
gives decides how these are found:

- a start point only: angle (default 90 degrees) and radius are used directly,
  turning from the start in the current direction;
- an end point (the start defaults to the previous item's exit point): exactly
  one of angle, radius, via point or depth fixes the curvature;
- neither: the arc continues from the previous item like the first case.

Angles are radians measured anticlockwise from the x axis.
"""

from __future__ import annotations

import logging
import math

from picscript.engine.context import InterpreterContext
from picscript.engine.environment import EnvironmentRecord
from picscript.engine.errors import ErrorCode
from picscript.engine.items import ArcItem, BoxItem, CurveItem, Direction, Item, LineItem
from picscript.engine.resolver.anchors import exit_point
from picscript.utils.fixed import tdiv
from picscript.utils.geometry import chord

logger = logging.getLogger(__name__)

_HALF_PI = 0.5 * math.pi

# Direction angle of a tangent heading up, down, right or left
_HEADINGS = {
    Direction.NORTH: _HALF_PI,
    Direction.SOUTH: -_HALF_PI,
    Direction.EAST: 0.0,
    Direction.WEST: math.pi,
}


def _start_angle(direction: Direction | None, cwangle: float) -> float:
    """Angle from the centre to the start for an arc setting off in ``direction``."""
    if direction is Direction.SOUTH:
        return cwangle - math.pi
    if direction is Direction.EAST:
        return cwangle - _HALF_PI
    if direction is Direction.WEST:
        return cwangle + _HALF_PI
    return cwangle


def _from_start(arc: ArcItem, env: EnvironmentRecord, angle: float, cwangle: float, sign: int) -> None:
    """Only the start is known: put the centre one radius off it, square to the direction."""
    radius = float(arc.radius)
    direction = arc.direction if arc.direction is not None else env.direction
    arc.angle1 = _start_angle(direction, cwangle)
    arc.x, arc.y = arc.x0, arc.y0
    if direction is Direction.NORTH:
        arc.x -= sign * arc.radius
    elif direction is Direction.SOUTH:
        arc.x += sign * arc.radius
    elif direction is Direction.EAST:
        arc.y += sign * arc.radius
    elif direction is Direction.WEST:
        arc.y -= sign * arc.radius

    arc.angle2 = arc.angle1 + sign * angle
    arc.x1 = arc.x + int(radius * math.cos(arc.angle2))
    arc.y1 = arc.y + int(radius * math.sin(arc.angle2))


def _depth_from_via(ctx: InterpreterContext, arc: ArcItem, angle: float, half_chord: float) -> int:
    """Perpendicular depth of the arc that passes through the via point."""
    vx = float(arc.via_x - arc.x0)
    vy = float(arc.via_y - arc.y0)
    s = math.sin(angle)
    c = math.cos(angle)
    across = vx * s - vy * c
    along = vx * c + vy * s

    if arc.depth is not None:
        ctx.errors.report(ErrorCode.ARC_OVERCONSTRAINED)

    # The via point must be off the chord, on the side the arc bulges to
    if abs(across) < 0.001 or (arc.cw and across > 0.0) or (not arc.cw and across < 0.0):
        ctx.errors.report(ErrorCode.BAD_VIA_POINT)
        return int(half_chord)

    beta = math.atan2(2.0 * half_chord - along, across) + math.atan2(along, across)
    return int(abs(half_chord / math.tan(0.5 * beta)))


def _from_chord(ctx: InterpreterContext, arc: ArcItem, angle: float, sign: int) -> float:
    """Both ends known: find the radius from the one constraint given, then the centre."""
    chord_angle, half_chord = chord(arc.x0, arc.y0, arc.x1, arc.y1)
    centre_sign = 1
    comp = 1.0

    if arc.angle is None and arc.radius is None and arc.depth is None and arc.via_x is None:
        arc.angle = 0
        angle = _HALF_PI

    if arc.angle is not None:
        if arc.radius is not None or arc.depth is not None or arc.via_x is not None:
            ctx.errors.report(ErrorCode.ARC_OVERCONSTRAINED)
        half_sine = math.sin(angle / 2.0)
        radius = half_chord / half_sine if half_sine != 0.0 else half_chord
        if angle > math.pi:
            comp = -comp
    elif arc.radius is not None:
        if arc.depth is not None or arc.via_x is not None:
            ctx.errors.report(ErrorCode.ARC_OVERCONSTRAINED)
        radius = float(arc.radius)
    else:
        if arc.via_x is not None:
            arc.depth = _depth_from_via(ctx, arc, chord_angle, half_chord)
        depth = float(arc.depth)
        radius = (half_chord * half_chord + depth * depth) / (2 * arc.depth) if arc.depth else half_chord
        # A depth beyond the half chord puts the centre on the other side
        if depth > half_chord:
            centre_sign = -1

    arc.radius = int(radius)
    if half_chord > radius:
        logger.debug("Arc radius %d raised to half chord %.0f", arc.radius, half_chord)
        radius = half_chord
        arc.radius = int(radius)

    offset = comp * math.sqrt(max(radius * radius - half_chord * half_chord, 0.0))
    arc.x = tdiv(arc.x0 + arc.x1, 2) - centre_sign * sign * int(offset * math.sin(chord_angle))
    arc.y = tdiv(arc.y0 + arc.y1, 2) + centre_sign * sign * int(offset * math.cos(chord_angle))
    arc.angle1 = math.atan2(arc.y0 - arc.y, arc.x0 - arc.x)
    arc.angle2 = math.atan2(arc.y1 - arc.y, arc.x1 - arc.x)
    return radius


def _continue_from(base: Item | None, arc: ArcItem, env: EnvironmentRecord, angle: float, cwangle: float, sign: int) -> None:
    """Neither end known: start where the base item leaves off."""
    radius = float(arc.radius)

    if base is None:
        arc.x = arc.y = 0
        arc.angle1 = _start_angle(arc.direction, cwangle)

    elif isinstance(base, ArcItem):
        if base.cw:
            cwangle = 0.0 if arc.cw else math.pi
        if arc.direction is None:
            # The stored end angle may have been trimmed for an arrowhead
            arc.angle1 = math.atan2(base.y1 - base.y, base.x1 - base.x) - cwangle
        else:
            arc.angle1 = _start_angle(arc.direction, cwangle)
        arc.x = base.x1 - int(radius * math.cos(arc.angle1))
        arc.y = base.y1 - int(radius * math.sin(arc.angle1))

    elif isinstance(base, (LineItem, CurveItem)):
        if isinstance(base, LineItem):
            end_x, end_y = base.x + base.width, base.y + base.depth
            default = math.atan2(base.depth, base.width)
        else:
            end_x, end_y = base.x1, base.y1
            default = math.atan2(base.y1 - (base.y0 + base.cy2), base.x1 - (base.x0 + base.cx2))
        heading = _HEADINGS.get(arc.direction, default)
        arc.angle1 = cwangle - (_HALF_PI - heading)
        arc.x = end_x - sign * int(radius * math.sin(heading))
        arc.y = end_y + sign * int(radius * math.cos(heading))

    elif isinstance(base, BoxItem):
        half_width = tdiv(base.width, 2)
        half_depth = tdiv(base.depth, 2)
        arc.x, arc.y = base.x, base.y
        direction = arc.direction if arc.direction is not None else env.direction
        if direction is Direction.NORTH:
            arc.angle1 = cwangle
            arc.x -= sign * arc.radius
            arc.y += half_depth
        elif direction is Direction.SOUTH:
            arc.angle1 = math.pi - cwangle
            arc.x += sign * arc.radius
            arc.y -= half_depth
        elif direction is Direction.EAST:
            arc.angle1 = cwangle - _HALF_PI
            arc.x += half_width
            arc.y += sign * arc.radius
        else:
            arc.angle1 = cwangle + _HALF_PI
            arc.x -= half_width
            arc.y -= sign * arc.radius

    else:
        arc.angle1 = 0.0
        arc.x, arc.y = base.x, base.y

    arc.angle2 = arc.angle1 + sign * angle
    arc.x0 = arc.x + int(radius * math.cos(arc.angle1))
    arc.y0 = arc.y + int(radius * math.sin(arc.angle1))
    arc.x1 = arc.x + int(radius * math.cos(arc.angle2))
    arc.y1 = arc.y + int(radius * math.sin(arc.angle2))


def resolve_arc(ctx: InterpreterContext, arc: ArcItem) -> None:
    """Fill in centre, radius, end points and angles."""
    env = ctx.env.top
    angle = math.radians(arc.angle / 1000) if arc.angle is not None else 0.0
    cwangle, sign = (math.pi, -1) if arc.cw else (0.0, 1)

    if arc.x1 is None:
        # Without an end point there is no chord for depth or via to act on
        if arc.depth is not None or arc.via_x is not None:
            ctx.errors.report(ErrorCode.ARC_NEEDS_END)
        if arc.angle is None:
            angle = _HALF_PI
        if arc.radius is None:
            arc.radius = env.arcradius
        if arc.x0 is not None:
            _from_start(arc, env, angle, cwangle, sign)
        else:
            _continue_from(ctx.base_item, arc, env, angle, cwangle, sign)
        radius = float(arc.radius)
    else:
        if arc.x0 is None:
            direction = arc.direction if arc.direction is not None else env.direction
            arc.x0, arc.y0 = exit_point(ctx.base_item, direction)
        radius = _from_chord(ctx, arc, angle, sign)

    # Leave room for arrowheads by trimming the angles
    if (arc.arrow_start or arc.arrow_end) and radius > 0.0:
        trim = sign * 2.0 * math.asin(min(arc.arrow_x / (2.0 * radius), 1.0))
        if arc.arrow_start:
            arc.angle1 += trim
        if arc.arrow_end:
            arc.angle2 -= trim
