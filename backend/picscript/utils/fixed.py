"""Fixed-point helpers. 1000 units = one nominal drawing unit. No engine imports."""

from __future__ import annotations

UNIT = 1000


def tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def scale(value: int, factor: int) -> int:
    """Scale a fixed-point value by a factor expressed in thousandths."""
    return tdiv(value * factor, UNIT)


def fixed(value: int) -> str:
    """Render a fixed-point value as text, dropping trailing zero decimals."""
    sign = "-" if value < 0 else ""
    value = abs(value)
    whole, frac = divmod(value, UNIT)
    if frac == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{frac:03d}".rstrip("0")


def rnd(value: int, resolution: int) -> int:
    """Round to the output resolution. Exact halves round toward zero."""
    if resolution <= 1:
        return value
    sign = -1 if value < 0 else 1
    quot, rem = divmod(abs(value), resolution)
    if rem > resolution // 2:
        quot += 1
    return quot * resolution * sign
