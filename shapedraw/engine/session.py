"""GestureSession — state of one draw or edit gesture.

Owned by the caller and passed through every callback; there is at most one
active shape per chart.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapedraw.engine.coordinates import CoordinateSpace
from shapedraw.models.shapes import ChartState, DrawMode, LayoutShape


@dataclass
class GestureSession:
    """Chart snapshot, coordinate space and mode of the current gesture."""

    chart: ChartState
    space: CoordinateSpace
    mode: DrawMode = DrawMode.CLOSED_PATH
    # Index into chart.shapes of the shape being edited; None for a fresh draw
    active_shape_index: int | None = None

    @property
    def editing(self) -> bool:
        return self.active_shape_index is not None

    @property
    def active_shape(self) -> LayoutShape | None:
        idx = self.active_shape_index
        if idx is None or not 0 <= idx < len(self.chart.shapes):
            return None
        return self.chart.shapes[idx]

    def effective_mode(self) -> DrawMode:
        """The active shape's own type decides the mode while editing."""
        shape = self.active_shape
        if shape is None:
            return self.mode
        return DrawMode.for_shape(shape.type, shape.path)
