"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# Parameter values used when sampling a curve for its extent (0.0 to 1.0 step 0.1)
CURVE_SAMPLES = 11

_QUARTER_PI = 0.25 * math.pi


def corner_offsets(half_width: int, half_depth: int, rectangular: bool) -> tuple[int, int]:
    """Centre-to-corner offsets. Round shapes use the 45 degree diagonal, not the true corner."""
    if rectangular:
        return half_width, half_depth
    return int(half_width * math.cos(_QUARTER_PI)), int(half_depth * math.sin(_QUARTER_PI))


def cubic_coefficients(
    start: int, c1: int, c2: int, end: int
) -> tuple[float, float, float]:
    """Power-basis coefficients (a, b, c) of a cubic, relative to its start."""
    a = float(end - 3 * c2 + 3 * c1 - start)
    b = float(3 * c2 - 6 * c1 + 3 * start)
    c = float(3 * (c1 - start))
    return a, b, c


def cubic_offsets(
    start: int, c1: int, c2: int, end: int, ts: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Offsets from the start point at each parameter in ``ts`` (one axis)."""
    a, b, c = cubic_coefficients(start, c1, c2, end)
    return ((a * ts + b) * ts + c) * ts


def sample_params(count: int = CURVE_SAMPLES) -> NDArray[np.float64]:
    """Evenly spaced parameters from 0 to 1 inclusive."""
    return np.linspace(0.0, 1.0, count)


def chord(x0: int, y0: int, x1: int, y1: int) -> tuple[float, float]:
    """Angle and half-length of the chord between two points."""
    dx = float(x1 - x0)
    dy = float(y1 - y0)
    return math.atan2(dy, dx), 0.5 * math.hypot(dx, dy)
