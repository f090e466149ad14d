"""Outline controller configuration — handle sizing and edit limits."""

from __future__ import annotations

from dataclasses import dataclass

from shapedraw.engine.spatial_constants import MINSELECT


@dataclass
class OutlineConfig:
    """Controls vertex handle layout and editing limits."""

    # Invisible hit area around each vertex (px)
    vertex_radius: float = MINSELECT * 1.5
    # Visible vertex marker (px)
    icon_radius: float = 3.0

    # A double-click delete never leaves a cell with fewer entries than this
    min_cell_entries: int = 4

    # Clicks needed to delete a vertex
    delete_clicks: int = 2
