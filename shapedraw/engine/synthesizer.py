"""Shape synthesizer — committed path → shape descriptions → updated shape list.

Each decoded cell becomes one record. The draw mode picks the record type;
the classifier only confirms it (a rect-mode cell that is no longer a
rectangle is kept as a path). While editing, the active shape is only
rewritten when its anchors actually changed.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from shapedraw.engine.classifier import is_ellipse, is_rectangle
from shapedraw.engine.coordinates import CoordinateSpace
from shapedraw.engine.ellipse import ellipse_bounding_box
from shapedraw.engine.session import GestureSession
from shapedraw.engine.spatial_constants import I270
from shapedraw.models.shapes import (
    DrawMode,
    DrawStyle,
    LayoutShape,
    ShapeDescription,
    ShapeType,
    ShapeUpdate,
)
from shapedraw.svg.commands import Cell
from shapedraw.svg.path_codec import decode_path, encode_path

logger = logging.getLogger(__name__)

ANCHOR_KEYS = ("x0", "x1", "y0", "y1")
PATH_KEYS = ("path",)


def synthesize_shape(
    cell: Cell,
    mode: DrawMode,
    style: DrawStyle,
    space: CoordinateSpace,
    editing: bool = False,
) -> ShapeDescription | None:
    """One shape record for a data-space cell, or None for a lone point."""
    if len(cell) < 2:
        return None

    fields: dict[str, Any] = {
        "editable": True,
        "xref": space.xref,
        "yref": space.yref,
        "layer": style.layer,
        "opacity": style.opacity,
        "line": style.line.model_copy(),
    }
    if not mode.is_open:
        fields["fillcolor"] = style.fillcolor
        fields["fillrule"] = style.fillrule

    if mode == DrawMode.RECT and is_rectangle(cell):
        fields.update(
            type=ShapeType.RECT,
            x0=cell[0].x,
            y0=cell[0].y,
            x1=cell[2].x,
            y1=cell[2].y,
        )
    elif mode == DrawMode.LINE:
        fields.update(
            type=ShapeType.LINE,
            x0=cell[0].x,
            y0=cell[0].y,
            x1=cell[1].x,
            y1=cell[1].y,
        )
    elif mode == DrawMode.CIRCLE and (
        (editing and len(cell) > I270) or is_ellipse(cell)
    ):
        x0, y0, x1, y1 = ellipse_bounding_box(cell, edited=editing)
        fields.update(type=ShapeType.CIRCLE, x0=x0, y0=y0, x1=x1, y1=y1)
    else:
        fields.update(type=ShapeType.PATH, path=encode_path([cell]))

    return ShapeDescription(**fields)


def has_changed(before: LayoutShape, after: ShapeDescription, keys: tuple[str, ...]) -> bool:
    """Exact comparison: any float drift counts as a change."""
    return any(getattr(before, k) != getattr(after, k) for k in keys)


def reconcile_shapes(
    shapes: list[LayoutShape],
    new_shapes: list[ShapeDescription],
    active_index: int | None = None,
) -> ShapeUpdate:
    """Merge synthesized records into the existing shape list.

    Existing entries are passed through as copies of their literal input.
    With an active index only that entry's anchors may change; without one
    the new records are appended.
    """
    updated = False
    out: list[dict[str, Any]] = []

    for q, before in enumerate(shapes):
        entry = copy.deepcopy(before.input)

        if active_index is not None and q == active_index and new_shapes:
            after = new_shapes[0].model_copy()

            if before.type == ShapeType.PATH:
                after.path = (after.path or "") + "".join(s.path or "" for s in new_shapes[1:])
                updated = has_changed(before, after, PATH_KEYS)
                if updated:
                    entry["path"] = after.path
            elif after.x0 is None:
                logger.warning(
                    "Edit of %s shape %d produced a %s, keeping previous anchors",
                    before.type.value,
                    q,
                    after.type.value,
                )
            else:
                updated = has_changed(before, after, ANCHOR_KEYS)
                if updated:
                    for k in ANCHOR_KEYS:
                        entry[k] = getattr(after, k)

        out.append(entry)

    if active_index is None:
        out.extend(s.to_input() for s in new_shapes)

    return ShapeUpdate(shapes=out, new_shapes=new_shapes, updated_active_shape=updated)


def add_new_shapes(path: str, session: GestureSession) -> ShapeUpdate | None:
    """Commit a rendered outline path. None when it holds no drawable cell."""
    mode = session.effective_mode()
    editing = session.editing
    style = session.chart.newshape

    polygons = decode_path(path, session.space, editing)

    new_shapes: list[ShapeDescription] = []
    for cell in polygons:
        shape = synthesize_shape(cell, mode, style, session.space, editing)
        if shape is not None:
            new_shapes.append(shape)

    if not new_shapes:
        logger.debug("Nothing to commit from path %r", path)
        return None

    update = reconcile_shapes(session.chart.shapes, new_shapes, session.active_shape_index)
    logger.info(
        "Committed %d shape(s) in %s mode (editing=%s, updated=%s)",
        len(new_shapes),
        mode.value,
        editing,
        update.updated_active_shape,
    )
    return update
