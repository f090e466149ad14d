"""Interactive outline controller — vertex and whole-shape editing of a live outline.

The outline is a pixel-space polygon set. Every drag works from the snapshot
taken when the drag started: each move event derives a fresh polygon set
from that snapshot plus the cumulative (dx, dy), re-encodes it and, while
editing an existing shape, commits it through the synthesizer.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from shapedraw.engine.classifier import is_ellipse, is_rectangle
from shapedraw.engine.config import OutlineConfig
from shapedraw.engine.ellipse import ellipse_from_corners
from shapedraw.engine.session import GestureSession
from shapedraw.engine.spatial_constants import I000, I090, I180, I270
from shapedraw.engine.synthesizer import add_new_shapes
from shapedraw.models.handles import VertexHandle
from shapedraw.models.shapes import DrawMode, ShapeUpdate
from shapedraw.svg.commands import Cell, PathCommand, PolygonSet, cell_points, copy_polygons
from shapedraw.svg.path_codec import decode_path, encode_path
from shapedraw.utils.geometry import bbox, ratio

logger = logging.getLogger(__name__)

# Resize cursors by [row][col] of a 3x3 grid; row 0 is the bottom.
CURSOR_SET = [
    ["sw-resize", "s-resize", "se-resize"],
    ["w-resize", "move", "e-resize"],
    ["nw-resize", "n-resize", "ne-resize"],
]

GRAB_CURSOR = "grab"
_CARDINALS = (I000, I090, I180, I270)


def get_cursor(x: float, y: float) -> str:
    """Cursor for a normalized position in a box, y measured upward."""
    col = min(max(math.floor(x * 3), 0), 2)
    row = min(max(math.floor(y * 3), 0), 2)
    return CURSOR_SET[row][col]


def new_shape_path(mode: DrawMode, x0: float, y0: float, x1: float, y1: float) -> str:
    """Outline path of a fresh two-corner drag in the given mode."""
    if mode == DrawMode.RECT:
        cell: Cell = [
            PathCommand("M", (x0, y0)),
            PathCommand("L", (x0, y1)),
            PathCommand("L", (x1, y1)),
            PathCommand("L", (x1, y0)),
            PathCommand("Z", (x0, y0)),
        ]
    elif mode == DrawMode.CIRCLE:
        cell = ellipse_from_corners(x0, y0, x1, y1)
    elif mode == DrawMode.LINE:
        cell = [PathCommand("M", (x0, y0)), PathCommand("L", (x1, y1))]
    else:
        raise ValueError(f"{mode.value} outlines follow the pointer trail, use path_from_points")
    return encode_path([cell])


def path_from_points(points: list[tuple[float, float]], closed: bool = False) -> str:
    """Outline path of a free-form pointer trail."""
    if not points:
        return encode_path([])
    cell: Cell = [PathCommand("M", tuple(points[0]))]
    cell.extend(PathCommand("L", tuple(p)) for p in points[1:])
    if closed and len(points) > 1 and tuple(points[-1]) != tuple(points[0]):
        cell.append(PathCommand("Z", tuple(points[0])))
    return encode_path([cell])


class OutlineSession:
    """Live outline of one gesture plus the callbacks a drag controller invokes."""

    def __init__(
        self,
        polygons: PolygonSet,
        session: GestureSession,
        config: OutlineConfig | None = None,
        on_redraw: Callable[[str], None] | None = None,
        on_relayout: Callable[[list[dict]], None] | None = None,
    ) -> None:
        self.polygons = copy_polygons(polygons)
        self.snapshot = copy_polygons(polygons)
        self.session = session
        self.config = config or OutlineConfig()
        self.on_redraw = on_redraw
        self.on_relayout = on_relayout
        self.cell_index = 0
        self.vertex_index = 0
        self.last_update: ShapeUpdate | None = None

    @classmethod
    def from_path(cls, path: str, session: GestureSession, **kwargs) -> OutlineSession:
        """Outline of a rendered pixel path (no coordinate mapping)."""
        return cls(decode_path(path), session, **kwargs)

    @property
    def path(self) -> str:
        return encode_path(self.polygons)

    # --- Handles ---

    def handles(self) -> list[VertexHandle]:
        """Vertex handles: corners of rectangles, cardinals of ellipses, every vertex otherwise."""
        handles: list[VertexHandle] = []
        for i, cell in enumerate(self.polygons):
            on_rect = is_rectangle(cell)
            on_ellipse = not on_rect and is_ellipse(cell)

            if on_rect:
                min_x, min_y, max_x, max_y = bbox(cell_points(cell))

            for j, cmd in enumerate(cell):
                if cmd.letter == "Z" or len(cmd.coords) < 2:
                    continue
                if on_ellipse and j not in _CARDINALS:
                    continue

                cursor: str | None = GRAB_CURSOR
                if on_rect:
                    rx = ratio(cmd.x, min_x, max_x)
                    ry = ratio(cmd.y, min_y, max_y)
                    cursor = get_cursor(rx, 1 - ry) if math.isfinite(rx) and math.isfinite(ry) else None

                handles.append(
                    VertexHandle(
                        cell_index=i,
                        vertex_index=j,
                        x=cmd.x,
                        y=cmd.y,
                        indicator="rect" if on_rect else "circle",
                        radius=self.config.vertex_radius,
                        icon_radius=self.config.icon_radius,
                        cursor=cursor,
                    )
                )
        return handles

    # --- Vertex drag ---

    def start_vertex_drag(self, cell_index: int, vertex_index: int) -> None:
        self.cell_index = cell_index
        self.vertex_index = vertex_index
        self.snapshot = copy_polygons(self.polygons)

    def move_vertex(self, dx: float, dy: float) -> None:
        """Move the grabbed vertex by the cumulative drag delta.

        Rectangle corners carry their neighbours along; a move that would
        break the rectangle is rejected and the snapshot restored.
        """
        if not self.polygons:
            return

        i, j = self.cell_index, self.vertex_index
        snap = self.snapshot[i]
        x0, y0 = snap[j].point
        tx, ty = x0 + dx, y0 + dy

        if is_rectangle(snap):
            cell: Cell = []
            for q, cmd in enumerate(snap):
                if q == j:
                    cell.append(cmd.moved_to(tx, ty))
                    continue
                nx = tx if cmd.x == x0 else cmd.x
                ny = ty if cmd.y == y0 else cmd.y
                cell.append(cmd.moved_to(nx, ny))

            if not is_rectangle(cell):
                logger.debug("Rejected vertex move (%g, %g): not a rectangle", dx, dy)
                cell = list(snap)
        else:
            cell = list(snap)
            cell[j] = snap[j].moved_to(tx, ty)

        polygons = copy_polygons(self.polygons)
        polygons[i] = cell
        self.polygons = polygons
        self.redraw()

    def click_vertex(self, num_clicks: int) -> None:
        """A double click deletes the grabbed vertex, keeping a minimum cell size."""
        if num_clicks != self.config.delete_clicks:
            return
        if not self.polygons:
            return

        cell = self.polygons[self.cell_index]
        if len(cell) > self.config.min_cell_entries:
            self.remove_vertex(self.cell_index, self.vertex_index)
        else:
            logger.debug("Refused vertex delete: cell %d has %d entries", self.cell_index, len(cell))
        self.redraw()

    def remove_vertex(self, cell_index: int, vertex_index: int) -> None:
        cell = [cmd for j, cmd in enumerate(self.polygons[cell_index]) if j != vertex_index]
        if vertex_index == 0 and cell:
            cell[0] = cell[0].with_letter("M")

        polygons = copy_polygons(self.polygons)
        polygons[cell_index] = cell
        self.polygons = polygons

    # --- Whole-shape drag ---

    def start_shape_drag(self, cell_index: int = 0) -> None:
        self.cell_index = cell_index
        self.snapshot = copy_polygons(self.polygons)

    def move_shape(self, dx: float, dy: float) -> None:
        """Translate every coordinate pair, control points included."""
        if not self.polygons:
            return
        self.polygons = [[cmd.translated(dx, dy) for cmd in cell] for cell in self.snapshot]
        self.redraw()

    def end_drag(self) -> None:
        self.snapshot = copy_polygons(self.polygons)

    # --- Output ---

    def render(self) -> str:
        path = self.path
        if self.on_redraw is not None:
            self.on_redraw(path)
        return path

    def commit(self) -> ShapeUpdate | None:
        """Synthesize shapes from the current outline and hand them to the chart."""
        update = add_new_shapes(self.path, self.session)
        self.last_update = update
        if update is not None and self.on_relayout is not None:
            self.on_relayout(update.shapes)
        return update

    def redraw(self) -> ShapeUpdate | None:
        """Re-render; an edited shape is also committed on every redraw."""
        self.render()
        if self.session.editing:
            return self.commit()
        return None
