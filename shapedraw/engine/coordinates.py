"""Coordinate spaces — pixel ⇄ data conversion for shape vertices.

Two spaces exist and one is chosen per gesture:

* ``AxisSpace``: shapes referenced to an x/y axis pair (data units)
* ``PaperSpace``: shapes referenced to the plot area, normalized to [0, 1]
  (optionally offset into a subplot domain)

``offset_relative`` tells whether a pixel value is already measured from the
plot-area origin or still includes the axis offset / plot margin.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapedraw.models.layout import Domain, LinearAxis, PlotSize

PAPER_REF = "paper"


@dataclass(frozen=True)
class AxisSpace:
    """Data space of an axis pair. Axes need ``p2r``, ``r2p``, ``offset`` and ``id``."""

    xaxis: Any
    yaxis: Any

    @property
    def xref(self) -> str:
        return self.xaxis.id

    @property
    def yref(self) -> str:
        return self.yaxis.id

    def to_data(self, px: float, py: float, offset_relative: bool = True) -> tuple[float, float]:
        if not offset_relative:
            px -= self.xaxis.offset
            py -= self.yaxis.offset
        return (self.xaxis.p2r(px), self.yaxis.p2r(py))

    def to_pixel(self, x: float, y: float, offset_relative: bool = True) -> tuple[float, float]:
        px = self.xaxis.r2p(x)
        py = self.yaxis.r2p(y)
        if not offset_relative:
            px += self.xaxis.offset
            py += self.yaxis.offset
        return (px, py)


@dataclass(frozen=True)
class PaperSpace:
    """Paper space: fractions of the plot area, y measured upward."""

    size: PlotSize
    domain: Domain | None = None

    @property
    def xref(self) -> str:
        return PAPER_REF

    @property
    def yref(self) -> str:
        return PAPER_REF

    def to_data(self, px: float, py: float, offset_relative: bool = True) -> tuple[float, float]:
        size = self.size
        if not offset_relative:
            px -= size.l
            py -= size.t
        if self.domain is not None:
            return (self.domain.x0 + px / size.w, self.domain.y1 - py / size.h)
        return (px / size.w, 1 - py / size.h)

    def to_pixel(self, x: float, y: float, offset_relative: bool = True) -> tuple[float, float]:
        size = self.size
        if self.domain is not None:
            px = (x - self.domain.x0) * size.w
            py = (self.domain.y1 - y) * size.h
        else:
            px = x * size.w
            py = (1 - y) * size.h
        if not offset_relative:
            px += size.l
            py += size.t
        return (px, py)


CoordinateSpace = AxisSpace | PaperSpace


def make_space(
    size: PlotSize,
    xaxis: LinearAxis | None = None,
    yaxis: LinearAxis | None = None,
    domain: Domain | None = None,
) -> CoordinateSpace:
    """Pick the space for a gesture: axis-referenced only with both axes and no domain."""
    if domain is None and xaxis is not None and yaxis is not None:
        return AxisSpace(xaxis, yaxis)
    return PaperSpace(size, domain)
