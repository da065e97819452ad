"""Curve placement: a cubic between two points with derived control points."""

from __future__ import annotations

import math

from picscript.engine.context import InterpreterContext
from picscript.engine.errors import ErrorCode
from picscript.engine.items import CurveItem
from picscript.engine.resolver.anchors import exit_point
from picscript.utils.fixed import tdiv

# Control points sit this fraction of the chord in from each end, before adjustment
CONTROL_FRACTION = 0.25


def resolve_curve(ctx: InterpreterContext, curve: CurveItem) -> bool:
    """Fill in the end points and control points. Returns False if the curve is unusable.

    The control point adjustments given by c1, c2 and cs are along the chord
    (x) and perpendicular to it (y). Afterwards they hold offsets from the
    start point.
    """
    if curve.x1 is None:
        ctx.errors.report(ErrorCode.CURVE_NEEDS_END)
        return False
    if curve.x0 is None:
        curve.x0, curve.y0 = exit_point(ctx.base_item, ctx.env.top.direction)

    curve.x = tdiv(curve.x0 + curve.x1, 2)
    curve.y = tdiv(curve.y0 + curve.y1, 2)

    curve.cx1 += curve.cxs
    curve.cy1 += curve.cys
    curve.cx2 += curve.cxs
    curve.cy2 += curve.cys

    cwsign = -1.0 if curve.cw else 1.0
    h = float(curve.y1 - curve.y0)
    w = float(curve.x1 - curve.x0)
    length = math.sqrt(h * h + w * w)
    if length < 0.001:
        ctx.errors.report(ErrorCode.CURVE_TOO_SHORT, length)
        return False

    # Axis-aligned chords get an explicit angle so that sin and cos have the right signs
    if w == 0:
        angle = math.pi / 2.0 if h > 0 else 3.0 * math.pi / 2.0
    elif h == 0:
        angle = math.pi if w < 0 else 0.0
    else:
        angle = math.atan(h / w)

    flen = length * CONTROL_FRACTION

    ylen = flen + curve.cy1
    fm = (flen + curve.cx1) / length
    dx = ylen * math.sin(angle) * cwsign
    dy = ylen * math.cos(angle) * cwsign
    curve.cx1 = int(w * fm + dx)
    curve.cy1 = int(h * fm - dy)

    if curve.wavy:
        cwsign = -cwsign
    ylen = flen + curve.cy2
    fm = (flen + curve.cx2) / length
    dx = ylen * math.sin(angle) * cwsign
    dy = ylen * math.cos(angle) * cwsign
    curve.cx2 = int(w - w * fm + dx)
    curve.cy2 = int(h - h * fm - dy)
    return True
