"""Shape classification of a single cell: rectangle, ellipse or generic path.

Both predicates are exact-shape tests with a small absolute tolerance. A
cell that nearly matches but fails the tolerance is a generic path.
"""

from __future__ import annotations

import enum
import math

from shapedraw.engine.spatial_constants import CIRCLE_SIDES
from shapedraw.svg.commands import Cell
from shapedraw.utils.geometry import almost_eq, dist


class CellKind(str, enum.Enum):
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    PATH = "path"


def is_rectangle(cell: Cell) -> bool:
    """Axis-aligned, non-degenerate quad closed back onto its first corner."""
    if len(cell) != 5:
        return False

    p = _points(cell)
    if p is None:
        return False
    for dim in (0, 1):
        e01 = p[0][dim] - p[1][dim]
        e32 = p[3][dim] - p[2][dim]
        if not almost_eq(e01, e32):
            return False

        e03 = p[0][dim] - p[3][dim]
        e12 = p[1][dim] - p[2][dim]
        if not almost_eq(e03, e12):
            return False

    # Rotated rectangles are not rectangles: rotation is not supported.
    if not almost_eq(p[0][0], p[1][0]) and not almost_eq(p[0][0], p[3][0]):
        return False

    area = dist(p[0], p[1]) * dist(p[0], p[3])
    return math.isfinite(area) and area != 0


def is_ellipse(cell: Cell) -> bool:
    """Uniformly sampled axis-aligned ellipse: mirrored diagonals pair up."""
    if len(cell) != CIRCLE_SIDES + 1:
        return False

    n = CIRCLE_SIDES
    half = n // 2
    p = _points(cell)
    if p is None:
        return False
    for i in range(n):
        k = (n * 2 - i) % n
        k2 = (half + k) % n
        i2 = (half + i) % n
        if not almost_eq(dist(p[i], p[i2]), dist(p[k], p[k2])):
            return False
    return True


def classify_cell(cell: Cell) -> CellKind:
    """Rectangle wins over ellipse; anything else is a path."""
    if is_rectangle(cell):
        return CellKind.RECTANGLE
    if is_ellipse(cell):
        return CellKind.ELLIPSE
    return CellKind.PATH


def _points(cell: Cell) -> list[tuple[float, float]] | None:
    if any(len(cmd.coords) < 2 for cmd in cell):
        return None
    return [cmd.point for cmd in cell]
