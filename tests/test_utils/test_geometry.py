"""Tests for the shared geometry helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from shapedraw.utils.geometry import almost_eq, bbox, dist, ratio, unit_circle


def test_almost_eq():
    assert almost_eq(1.0, 1.0 + 1e-7)
    assert not almost_eq(1.0, 1.0 + 1e-5)
    assert not almost_eq(math.inf, math.inf)


def test_dist():
    assert dist((0, 0), (3, 4)) == 5


def test_bbox():
    pts = np.array([[3, 1], [-2, 5], [0, 0]], dtype=float)
    assert bbox(pts) == (-2, 0, 3, 5)
    assert bbox(np.empty((0, 2))) == (0, 0, 0, 0)


def test_unit_circle():
    pts = unit_circle(4)
    assert pts.shape == (4, 2)
    np.testing.assert_allclose(pts, [[1, 0], [0, 1], [-1, 0], [0, -1]], atol=1e-12)


class TestRatio:
    def test_inside(self):
        assert ratio(5, 0, 10) == 0.5

    def test_zero_span(self):
        assert math.isnan(ratio(2, 2, 2))
        assert ratio(3, 2, 2) == math.inf
        assert ratio(1, 2, 2) == -math.inf

    @pytest.mark.parametrize("value", [-1, 11])
    def test_outside(self, value):
        assert not 0 <= ratio(value, 0, 10) <= 1
