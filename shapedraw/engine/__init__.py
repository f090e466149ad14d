"""Shape path engine: coordinate spaces, classification and ellipse geometry.

The synthesizer and outline controller depend on the path codec and are
imported from their own modules.
"""

from shapedraw.engine.classifier import CellKind, classify_cell, is_ellipse, is_rectangle
from shapedraw.engine.coordinates import AxisSpace, CoordinateSpace, PaperSpace, make_space
from shapedraw.engine.ellipse import (
    corners_to_ellipse_bbox,
    ellipse_bounding_box,
    ellipse_from_corners,
    ellipse_to_corners,
)

__all__ = [
    "AxisSpace",
    "CellKind",
    "CoordinateSpace",
    "PaperSpace",
    "classify_cell",
    "corners_to_ellipse_bbox",
    "ellipse_bounding_box",
    "ellipse_from_corners",
    "ellipse_to_corners",
    "is_ellipse",
    "is_rectangle",
    "make_space",
]
