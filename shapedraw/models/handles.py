"""Vertex handle model handed to the renderer."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class VertexHandle(BaseModel):
    cell_index: int
    vertex_index: int
    x: float
    y: float
    indicator: Literal["rect", "circle"] = "circle"
    radius: float = 18.0  # hit area
    icon_radius: float = 3.0  # visible marker
    cursor: str | None = None
