"""Ellipse construction from a drag, and its inverse.

A drag from (x0, y0) to (x1, y1) draws the ellipse centred on the drag
start that passes through the drag end at 45 degrees. Its bounding box is
the drag rectangle reflected about the start point and scaled by sqrt(2).
"""

from __future__ import annotations

import numpy as np

from shapedraw.engine.spatial_constants import (
    CIRCLE_SIDES,
    COS45,
    I000,
    I045,
    I090,
    I180,
    I270,
    SIN45,
    SQRT2,
)
from shapedraw.svg.commands import Cell, PathCommand
from shapedraw.utils.geometry import unit_circle


def corners_to_ellipse_bbox(
    x0: float, y0: float, x1: float, y1: float
) -> tuple[float, float, float, float]:
    """Drag corners → (ex0, ey0, ex1, ey1) bounding box of the ellipse."""
    dx = x1 - x0
    dy = y1 - y0

    x0 -= dx
    y0 -= dy

    cx = (x0 + x1) / 2
    cy = (y0 + y1) / 2

    dx *= SQRT2
    dy *= SQRT2

    return (cx - dx, cy - dy, cx + dx, cy + dy)


def ellipse_from_corners(x0: float, y0: float, x1: float, y1: float) -> Cell:
    """Closed CIRCLE_SIDES-gon approximating the ellipse of a drag.

    A drag with one zero radius makes a circle instead.
    """
    ex0, ey0, ex1, ey1 = corners_to_ellipse_bbox(x0, y0, x1, y1)

    cx = (ex1 + ex0) / 2
    cy = (ey1 + ey0) / 2
    rx = (ex1 - ex0) / 2
    ry = (ey1 - ey0) / 2

    if not rx:
        rx = ry = ry / SQRT2
    if not ry:
        ry = rx = rx / SQRT2

    pts = unit_circle(CIRCLE_SIDES) * np.array([rx, ry]) + np.array([cx, cy])

    cell: Cell = [PathCommand("M", (float(pts[0, 0]), float(pts[0, 1])))]
    for px, py in pts[1:]:
        cell.append(PathCommand("L", (float(px), float(py))))
    cell.append(PathCommand("Z", cell[0].coords))
    return cell


def ellipse_to_corners(cell: Cell, edited: bool = False) -> tuple[float, float, float, float]:
    """Recover the drag corners (centre, 45-degree point) of an ellipse cell.

    A freshly drawn ellipse still has its 45-degree sample. Editing moves only
    the cardinal vertices, so an edited ellipse is read from those four.
    """
    if len(cell) <= I270:
        raise ValueError(f"ellipse cell needs more than {I270} entries, got {len(cell)}")

    p000 = cell[I000].point
    p180 = cell[I180].point

    if not edited:
        cx = (p000[0] + p180[0]) / 2
        cy = (p000[1] + p180[1]) / 2
        return (cx, cy, cell[I045].x, cell[I045].y)

    p090 = cell[I090].point
    p270 = cell[I270].point
    cx = (p090[0] + p270[0]) / 2
    cy = (p000[1] + p180[1]) / 2
    rx = (p000[0] - p180[0]) / 2
    ry = (p090[1] - p270[1]) / 2
    return (cx, cy, cx + rx * COS45, cy + ry * SIN45)


def ellipse_bounding_box(cell: Cell, edited: bool = False) -> tuple[float, float, float, float]:
    """Bounding box anchors (xmin, ymin, xmax, ymax) stored for a circle shape.

    The anchors are always sorted. A circle stored with x0 > x1 or y0 > y1 is
    therefore rewritten in sorted order by its first edit, even a no-op one.
    """
    ex0, ey0, ex1, ey1 = corners_to_ellipse_bbox(*ellipse_to_corners(cell, edited))
    return (min(ex0, ex1), min(ey0, ey1), max(ex0, ex1), max(ey0, ey1))
