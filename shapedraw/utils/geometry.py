"""Leaf-node geometry helpers shared by the classifier, ellipse and outline code."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# Absolute tolerance for edge/diagonal comparisons in data units.
ALMOST_EQ_TOL = 1e-6


def almost_eq(a: float, b: float, tol: float = ALMOST_EQ_TOL) -> bool:
    """Absolute-tolerance float comparison."""
    return abs(a - b) <= tol


def dist(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two (x, y) points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def unit_circle(n: int) -> NDArray[np.float64]:
    """(cos t, sin t) for n uniform angles t = 2*pi*k/n, k = 0..n-1."""
    t = np.arange(n) * 2 * np.pi / n
    return np.column_stack([np.cos(t), np.sin(t)])


def ratio(value: float, lo: float, hi: float) -> float:
    """Normalized position of value in [lo, hi]; nan/inf when the span is zero."""
    span = hi - lo
    if span == 0:
        return math.nan if value == lo else math.copysign(math.inf, value - lo)
    return (value - lo) / span
