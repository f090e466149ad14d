"""Path codec — SVG path string ⇄ polygon set.

``decode_path`` walks the tokenized path keeping the current point and the
sub-path start in pixel space, normalizes every command into internal
storage order and maps each coordinate pair into data space.
``encode_path`` is the structural inverse and is what the live outline is
rendered from.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from shapedraw.engine.spatial_constants import CIRCLE_SIDES
from shapedraw.svg.commands import PathCommand, PolygonSet
from shapedraw.svg.tokenizer import tokenize_path

if TYPE_CHECKING:
    from shapedraw.engine.coordinates import CoordinateSpace

logger = logging.getLogger(__name__)

# Degenerate single-point path rendered when there is nothing to draw
EMPTY_PATH = "M0,0Z"

# Internal storage index -> serialization position (index 0 is the letter)
_ORDER_C = (0, 3, 4, 5, 6, 1, 2)
_ORDER_QS = (0, 3, 4, 1, 2)
_ORDERS: dict[str, tuple[int, ...]] = {"C": _ORDER_C, "Q": _ORDER_QS, "S": _ORDER_QS}

# Coordinates per stored letter (Z may carry its closing point)
_ARITY = {"M": 2, "L": 2, "T": 2, "Z": 2, "Q": 4, "S": 4, "C": 6}


def format_number(value: float) -> str:
    """Shortest round-trip text for a coordinate; integral values lose the '.0'."""
    v = float(value)
    if v.is_integer():
        return str(int(v))
    return repr(v)


def encode_path(polygons: PolygonSet) -> str:
    """Serialize a polygon set. Never returns an empty string."""
    parts: list[str] = []
    for cell in polygons:
        for cmd in cell:
            if cmd.letter == "Z":
                parts.append("Z")
                continue
            if _ARITY.get(cmd.letter) != len(cmd.coords):
                logger.warning("Skipping malformed command %r %s", cmd.letter, cmd.coords)
                continue
            row = (cmd.letter, *cmd.coords)
            order = _ORDERS.get(cmd.letter, range(len(row)))
            values = [row[k] for k in order]
            parts.append(values[0] + ",".join(format_number(v) for v in values[1:]))

    if not parts:
        return EMPTY_PATH
    return "".join(parts)


def decode_path(
    path: str,
    space: CoordinateSpace | None = None,
    editing: bool = False,
) -> PolygonSet:
    """Parse a path string into cells of data-space commands.

    ``editing`` marks the path of an existing shape being edited: its pixels
    still include the axis offset / plot margin, which is removed before
    mapping. A fresh draw outline is already offset-relative. Without a space
    the pixel coordinates are kept.
    """
    polygons: PolygonSet = []
    x = y = 0.0
    start_x, start_y = x, y
    offset_relative = not editing

    for raw in tokenize_path(path):
        letter = raw[0]
        args = _absolute_args(letter, raw[1:], x, y)
        kind = letter.upper()
        new: list[PathCommand] = []

        if kind == "M":
            polygons.append([])
            new.append(PathCommand("M", (args[0], args[1])))
            start_x, start_y = args[0], args[1]

        elif kind in ("Q", "S"):
            x1, y1, ex, ey = args
            new.append(PathCommand(kind, (ex, ey, x1, y1)))

        elif kind == "C":
            x1, y1, x2, y2, ex, ey = args
            new.append(PathCommand("C", (ex, ey, x1, y1, x2, y2)))

        elif kind in ("L", "T"):
            new.append(PathCommand(kind, (args[0], args[1])))

        elif kind == "H":
            new.append(PathCommand("L", (args[0], y)))

        elif kind == "V":
            new.append(PathCommand("L", (x, args[0])))

        elif kind == "A":
            new.extend(_arc_to_lines(args, x, y))

        elif kind == "Z":
            if x != start_x or y != start_y:
                new.append(PathCommand("Z", (start_x, start_y)))

        if new and not polygons:
            logger.warning("Path %r draws before its first moveto, skipping %r", path, letter)
            continue

        for cmd in new:
            # track the endpoint in pixel space for H/V/Z and relative commands
            x, y = cmd.point
            polygons[-1].append(_to_data(cmd, space, offset_relative))

    return polygons


def _absolute_args(letter: str, args: list[float], x: float, y: float) -> list[float]:
    """Convert relative (lowercase) command arguments to absolute ones."""
    if letter.isupper() or letter == "z":
        return list(args)
    kind = letter.upper()
    if kind == "H":
        return [args[0] + x]
    if kind == "V":
        return [args[0] + y]
    if kind == "A":
        return list(args[:5]) + [args[5] + x, args[6] + y]
    return [v + (x if k % 2 == 0 else y) for k, v in enumerate(args)]


def _arc_to_lines(args: list[float], x: float, y: float) -> list[PathCommand]:
    """Half-turn of line segments around a centre synthesized from the current point.

    The current point is taken as the 0-degree sample of the ellipse; a
    cleared large-arc flag runs the half-turn the other way. Only the arcs of
    rendered ellipse shapes are meant to survive this with full fidelity.
    """
    rx, ry = args[0], args[1]
    if not args[3]:
        rx, ry = -rx, -ry

    cen_x = x - rx
    cen_y = y
    lines: list[PathCommand] = []
    for k in range(1, CIRCLE_SIDES // 2 + 1):
        t = 2 * math.pi * k / CIRCLE_SIDES
        lines.append(PathCommand("L", (cen_x + rx * math.cos(t), cen_y + ry * math.sin(t))))
    return lines


def _to_data(cmd: PathCommand, space: CoordinateSpace | None, offset_relative: bool) -> PathCommand:
    if space is None:
        return cmd
    mapped: list[float] = []
    for px, py in cmd.pairs:
        mapped.extend(space.to_data(px, py, offset_relative))
    return PathCommand(cmd.letter, tuple(mapped))
