"""Minimal DXF reader for custom tabletop outlines.

Drawing files are a flat stream of (group code, value) line pairs. Only two
entity kinds carry the geometry we need:

- ``LWPOLYLINE``: code 70 holds bit flags (bit 0 = closed), codes 10/20
  are the X/Y of each vertex in turn.
- ``LINE``: codes 10/20 are the start point, 11/21 the end point.

Every other entity is skipped until the next code 0. The reader never
raises; an empty ``paths`` tuple means nothing usable was found.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field

from ..value_objects import OutlinePoint, ParsedCustomOutline
from .bounds import calculate_bounds

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")

ENTITY_CODE = "0"
LWPOLYLINE = "LWPOLYLINE"
LINE = "LINE"
SUPPORTED_ENTITIES = frozenset({LWPOLYLINE, LINE})

CLOSED_FLAG = 1


def _to_number(value: str) -> float:
    """Convert a group value to float, NaN when it is not numeric."""
    try:
        return float(value)
    except ValueError:
        return math.nan


def _to_flags(value: str) -> int:
    number = _to_number(value)
    if not math.isfinite(number):
        return 0
    return int(number)


@dataclass
class _EntityBuffer:
    """Geometry accumulated for the entity currently being read."""

    kind: str | None = None
    flags: int = 0
    pending_x: float | None = None
    vertices: list[OutlinePoint] = field(default_factory=list)
    start: list[float] = field(default_factory=list)
    end: list[float] = field(default_factory=list)

    def flush(self) -> tuple[OutlinePoint, ...] | None:
        """Return the finished path for this entity, if it has one."""
        if self.kind == LWPOLYLINE and self.vertices:
            path = list(self.vertices)
            if self.flags & CLOSED_FLAG:
                path.append(OutlinePoint(path[0].x, path[0].y))
            return tuple(path)
        if self.kind == LINE and self.start and self.end:
            return (
                OutlinePoint(self.start[0], self.start[1]),
                OutlinePoint(self.end[0], self.end[1]),
            )
        if self.kind is not None:
            logger.debug(f"Dropping {self.kind} entity without usable geometry")
        return None

    def read(self, code: str, value: str) -> None:
        if self.kind == LWPOLYLINE:
            if code == "70":
                self.flags = _to_flags(value)
            elif code == "10":
                self.pending_x = _to_number(value)
            elif code == "20" and self.pending_x is not None:
                self.vertices.append(OutlinePoint(self.pending_x, _to_number(value)))
                self.pending_x = None
        elif self.kind == LINE:
            if code in ("10", "20"):
                _set_axis(self.start, 0 if code == "10" else 1, _to_number(value))
            elif code in ("11", "21"):
                _set_axis(self.end, 0 if code == "11" else 1, _to_number(value))


def _set_axis(point: list[float], axis: int, value: float) -> None:
    # A point that only receives one axis keeps 0.0 for the other.
    if not point:
        point.extend([0.0, 0.0])
    point[axis] = value


class OutlineParser:
    """Extracts polylines and line segments from DXF text.

    Example:
        >>> outline = OutlineParser().parse(dxf_text)
        >>> if outline.is_empty:
        ...     print("no usable outline")
    """

    def parse(self, content: str) -> ParsedCustomOutline:
        """Parse drawing text into an outline.

        Args:
            content: Raw DXF file contents.

        Returns:
            Outline whose ``paths`` keep drawing order, with ``bounds``
            computed over every point.
        """
        lines = _LINE_BREAK.split(content)
        paths: list[tuple[OutlinePoint, ...]] = []
        entity = _EntityBuffer()

        cursor = 0
        while cursor < len(lines) - 1:
            code = lines[cursor].strip()
            value = lines[cursor + 1].strip()
            cursor += 2

            if code == ENTITY_CODE:
                path = entity.flush()
                if path is not None:
                    paths.append(path)
                kind = value if value in SUPPORTED_ENTITIES else None
                entity = _EntityBuffer(kind=kind)
                continue

            if entity.kind is not None:
                entity.read(code, value)

        path = entity.flush()
        if path is not None:
            paths.append(path)

        logger.debug(f"Parsed {len(paths)} path(s) from {len(lines)} lines")
        return ParsedCustomOutline(paths=tuple(paths), bounds=calculate_bounds(paths))


def parse_dxf_outline(content: str) -> ParsedCustomOutline:
    """Parse DXF text with a default OutlineParser."""
    return OutlineParser().parse(content)
