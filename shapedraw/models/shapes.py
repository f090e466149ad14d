"""Shape description models — the records exchanged with the chart state."""

from __future__ import annotations

import enum
from typing import Any, Literal

from pydantic import BaseModel, Field

from shapedraw.models.layout import PlotSize


class ShapeType(str, enum.Enum):
    LINE = "line"
    RECT = "rect"
    CIRCLE = "circle"
    PATH = "path"


class DrawMode(str, enum.Enum):
    """What a drag draws. Line and open-path modes produce unfilled shapes."""

    LINE = "drawline"
    RECT = "drawrect"
    CIRCLE = "drawcircle"
    OPEN_PATH = "drawopenpath"
    CLOSED_PATH = "drawclosedpath"

    @property
    def is_open(self) -> bool:
        return self in (DrawMode.LINE, DrawMode.OPEN_PATH)

    @classmethod
    def for_shape(cls, shape_type: ShapeType, path: str | None = None) -> DrawMode:
        """Mode that re-creates an existing shape of the given type."""
        if shape_type == ShapeType.RECT:
            return cls.RECT
        if shape_type == ShapeType.CIRCLE:
            return cls.CIRCLE
        if shape_type == ShapeType.LINE:
            return cls.LINE
        if (path or "").endswith("Z"):
            return cls.CLOSED_PATH
        return cls.OPEN_PATH


class LineStyle(BaseModel):
    color: str = "#444"
    width: float = Field(default=4.0, ge=0)
    dash: str = "solid"


class DrawStyle(BaseModel):
    """Style applied to newly drawn shapes."""

    layer: Literal["above", "below"] = "above"
    opacity: float = Field(default=1.0, ge=0, le=1)
    fillcolor: str = "rgba(0,0,0,0)"
    fillrule: Literal["evenodd", "nonzero"] = "evenodd"
    line: LineStyle = Field(default_factory=LineStyle)


class ShapeDescription(BaseModel):
    """A synthesized shape record. Anchors are x0..y1, or path for path shapes."""

    type: ShapeType
    editable: bool = True
    xref: str = "paper"
    yref: str = "paper"
    layer: str = "above"
    opacity: float = 1.0
    line: LineStyle = Field(default_factory=LineStyle)
    fillcolor: str | None = None
    fillrule: str | None = None
    x0: float | None = None
    y0: float | None = None
    x1: float | None = None
    y1: float | None = None
    path: str | None = None

    def to_input(self) -> dict[str, Any]:
        """Plain dict as stored in the chart's shape list."""
        return self.model_dump(mode="json", exclude_none=True)


class LayoutShape(BaseModel):
    """An existing shape: derived geometry plus the literal input it came from."""

    type: ShapeType
    x0: float | None = None
    y0: float | None = None
    x1: float | None = None
    y1: float | None = None
    path: str | None = None
    input: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_input(cls, data: dict[str, Any]) -> LayoutShape:
        """Derive the geometry fields from a literal shape input."""
        shape_type = data.get("type") or (ShapeType.PATH if data.get("path") else ShapeType.RECT)
        return cls(
            type=shape_type,
            x0=data.get("x0"),
            y0=data.get("y0"),
            x1=data.get("x1"),
            y1=data.get("y1"),
            path=data.get("path"),
            input=dict(data),
        )


class ChartState(BaseModel):
    """The slice of chart state the engine reads."""

    shapes: list[LayoutShape] = Field(default_factory=list)
    newshape: DrawStyle = Field(default_factory=DrawStyle)
    size: PlotSize


class ShapeUpdate(BaseModel):
    """Result of a commit: the full shape list to persist."""

    shapes: list[dict[str, Any]] = Field(default_factory=list)
    new_shapes: list[ShapeDescription] = Field(default_factory=list)
    updated_active_shape: bool = False
