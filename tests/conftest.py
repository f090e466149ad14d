"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from shapedraw.engine.coordinates import AxisSpace, PaperSpace
from shapedraw.models.layout import LinearAxis, PlotSize
from shapedraw.models.shapes import ChartState, LayoutShape
from shapedraw.svg.commands import Cell, PathCommand


# Pixel outlines as the renderer produces them

RECT_PATH = "M0,0L0,10L10,10L10,0Z"

# Five entries, closed by an explicit line back to the start (no-op Z)
PENTAGON_PATH = "M0,0L10,0L15,8L5,12L0,0Z"

CUBIC_PATH = "M0,0C1,2,3,4,5,6L5,0Z"

# Ellipse shape as rendered: two half-turn arcs around (10, 10), radius 10
CIRCLE_ARC_PATH = "M20,10A10,10 0 1,1 0,10A10,10 0 0,1 20,10Z"

# Plot with margins; axes span [0, 10] over 400 px
PLOT_SIZE = PlotSize(l=80, t=100, w=400, h=400)


def make_cell(points: list[tuple[float, float]], closed: bool = True) -> Cell:
    """M + L commands through the points, closed by Z back to the first one."""
    cell: Cell = [PathCommand("M", points[0])]
    cell.extend(PathCommand("L", p) for p in points[1:])
    if closed:
        cell.append(PathCommand("Z", points[0]))
    return cell


def rotate(points: list[tuple[float, float]], degrees: float) -> list[tuple[float, float]]:
    t = math.radians(degrees)
    c, s = math.cos(t), math.sin(t)
    return [(x * c - y * s, x * s + y * c) for x, y in points]


SQUARE = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]


@pytest.fixture
def xaxis() -> LinearAxis:
    return LinearAxis(id="x", range=(0, 10), length=400, offset=80)


@pytest.fixture
def yaxis() -> LinearAxis:
    return LinearAxis(id="y", range=(0, 10), length=400, offset=100)


@pytest.fixture
def axis_space(xaxis: LinearAxis, yaxis: LinearAxis) -> AxisSpace:
    return AxisSpace(xaxis, yaxis)


@pytest.fixture
def paper_space() -> PaperSpace:
    return PaperSpace(PLOT_SIZE)


@pytest.fixture
def chart() -> ChartState:
    return ChartState(size=PLOT_SIZE)


@pytest.fixture
def rect_chart() -> ChartState:
    """Chart with one rect on the x/y axes plus an unrelated line shape."""
    rect = {
        "type": "rect",
        "xref": "x",
        "yref": "y",
        "x0": 1.25,
        "y0": 7.5,
        "x1": 3.75,
        "y1": 5.0,
        "name": "target",
    }
    line = {"type": "line", "xref": "paper", "yref": "paper", "x0": 0, "y0": 0, "x1": 1, "y1": 1}
    return ChartState(
        size=PLOT_SIZE,
        shapes=[LayoutShape.from_input(rect), LayoutShape.from_input(line)],
    )


# Absolute pixel outline of the rect in rect_chart (offsets 80 / 100)
RECT_CHART_PIXEL_PATH = "M130,200L130,300L230,300L230,200Z"
