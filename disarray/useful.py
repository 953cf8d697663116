"""Small geometry helpers: circle collisions and grid line rasterising."""

from __future__ import annotations

import math


def circles_collide(
    x1: float, y1: float, radius1: float, x2: float, y2: float, radius2: float
) -> bool:
    """True when two circles overlap; touching circles do not collide."""
    distance = math.hypot(x1 - x2, y1 - y2)
    return distance < radius1 + radius2


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


def line(x1: int, y1: int, x2: int, y2: int, gridw: int) -> list[tuple[int, int]]:
    """Grid cells crossed by a line between two points.

    Coordinates are in pixels; each returned cell is the point divided by
    ``gridw``. The far end point itself is not included.
    """
    if gridw <= 0:
        raise ValueError("gridw must be positive")

    steep = abs(y2 - y1) > abs(x2 - x1)
    if steep:
        x1, y1 = y1, x1
        x2, y2 = y2, x2
    if x1 > x2:
        x1, x2 = x2, x1
        y1, y2 = y2, y1

    deltax = x2 - x1
    if deltax == 0:
        return []
    deltaerr = abs(y2 - y1) / deltax
    ystep = gridw if y1 < y2 else -gridw

    cells = []
    error = 0.0
    y = y1
    for x in range(x1, x2, gridw):
        cell = (_trunc_div(x, gridw), _trunc_div(y, gridw))
        cells.append((cell[1], cell[0]) if steep else cell)
        error += deltaerr
        if error >= 0.5:
            y += ystep
            error -= 1.0
    return cells