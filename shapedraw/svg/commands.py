"""Polygon model — command tuples, cells and polygon sets.

A command stores its endpoint first and its control points after it:

    L, T, M, Z   (x, y)
    Q, S         (x, y, ctrlX, ctrlY)
    C            (x, y, ctrl1X, ctrl1Y, ctrl2X, ctrl2Y)

Serialization order differs for curves; see ``path_codec``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class PathCommand:
    """One drawing instruction in internal storage order."""

    letter: str
    coords: tuple[float, ...] = ()

    @property
    def x(self) -> float:
        return self.coords[0]

    @property
    def y(self) -> float:
        return self.coords[1]

    @property
    def point(self) -> tuple[float, float]:
        return (self.coords[0], self.coords[1])

    @property
    def pairs(self) -> list[tuple[float, float]]:
        """All coordinate pairs, endpoint first."""
        c = self.coords
        return [(c[k], c[k + 1]) for k in range(0, len(c) - 1, 2)]

    def moved_to(self, x: float, y: float) -> PathCommand:
        """Same command with a new endpoint; control points unchanged."""
        return PathCommand(self.letter, (x, y) + self.coords[2:])

    def translated(self, dx: float, dy: float) -> PathCommand:
        """Every coordinate pair shifted by (dx, dy)."""
        shifted: list[float] = []
        for x, y in self.pairs:
            shifted.extend((x + dx, y + dy))
        return PathCommand(self.letter, tuple(shifted))

    def with_letter(self, letter: str) -> PathCommand:
        return PathCommand(letter, self.coords)


Cell = list[PathCommand]
PolygonSet = list[Cell]


def cell_points(cell: Cell) -> NDArray[np.float64]:
    """Nx2 array of command endpoints (commands without coordinates skipped)."""
    pts = [cmd.point for cmd in cell if len(cmd.coords) >= 2]
    if not pts:
        return np.empty((0, 2))
    return np.array(pts, dtype=np.float64)


def copy_polygons(polygons: PolygonSet) -> PolygonSet:
    """Structural copy; commands are immutable so only the lists are new."""
    return [list(cell) for cell in polygons]
