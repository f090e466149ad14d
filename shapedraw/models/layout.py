"""Plot geometry models — plot size, subplot domain and linear axes."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class PlotSize(BaseModel):
    """Pixel size of the plotting area and its margins."""

    l: float = 0.0  # noqa: E741
    t: float = 0.0
    w: float = Field(gt=0)
    h: float = Field(gt=0)


class Domain(BaseModel):
    """A subplot's fractional sub-rectangle within paper space."""

    x0: float = 0.0
    x1: float = 1.0
    y0: float = 0.0
    y1: float = 1.0


class LinearAxis(BaseModel):
    """A linear axis: maps offset-relative pixels to range values.

    Axis ids follow the chart convention: ``x``, ``x2``, ``y``, ``y3``...
    Y axes grow upward in data space while pixels grow downward.
    """

    id: str
    range: tuple[float, float]
    length: float = Field(gt=0)
    offset: float = 0.0

    @field_validator("id")
    @classmethod
    def _check_id(cls, v: str) -> str:
        if not v or v[0] not in ("x", "y"):
            raise ValueError(f"axis id must start with 'x' or 'y', got {v!r}")
        return v

    @field_validator("range")
    @classmethod
    def _check_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        if v[0] == v[1]:
            raise ValueError("axis range must not be empty")
        return v

    @property
    def letter(self) -> str:
        return self.id[0]

    def p2r(self, px: float) -> float:
        """Offset-relative pixel → range value."""
        r0, r1 = self.range
        if self.letter == "y":
            return r1 - px * (r1 - r0) / self.length
        return r0 + px * (r1 - r0) / self.length

    def r2p(self, value: float) -> float:
        """Range value → offset-relative pixel."""
        r0, r1 = self.range
        if self.letter == "y":
            return (r1 - value) * self.length / (r1 - r0)
        return (value - r0) * self.length / (r1 - r0)
