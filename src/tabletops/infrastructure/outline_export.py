"""Outline exporters: DXF for the workshop, SVG for previews.

Both work from a ``ParsedCustomOutline`` and translate it so its bounding
box starts at the origin.
"""

from __future__ import annotations

import logging
import math
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units

from tabletops.domain.services.measurements import round_half_up
from tabletops.domain.value_objects import OutlinePoint, ParsedCustomOutline

if TYPE_CHECKING:
    from ezdxf.document import Drawing

logger = logging.getLogger(__name__)


LAYERS = {
    "OUTLINE": {"color": 7},  # White - outer perimeter
    "CUTOUTS": {"color": 1},  # Red - inner cutouts and loose segments
}

PERIMETER_FILL = "rgba(16, 185, 129, 0.15)"
CUTOUT_FILL = "rgba(14, 116, 144, 0.2)"
STROKE = "#34d399"


def _is_finite(path: tuple[OutlinePoint, ...]) -> bool:
    return all(math.isfinite(p.x) and math.isfinite(p.y) for p in path)


def _is_closed(path: tuple[OutlinePoint, ...]) -> bool:
    return len(path) > 3 and path[0] == path[-1]


class OutlineDxfExporter:
    """Writes an outline as an R2010 DXF in millimetres.

    Closed rings become closed LWPOLYLINEs, open polylines stay open and
    two-point paths become LINE entities. The first path goes on the
    OUTLINE layer, the rest on CUTOUTS.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def export(self, outline: ParsedCustomOutline, path: Path) -> None:
        doc = self._build(outline)
        doc.saveas(path)
        logger.info(f"Wrote {len(outline.paths)} path(s) to {path}")

    def export_string(self, outline: ParsedCustomOutline) -> str:
        stream = StringIO()
        self._build(outline).write(stream)
        return stream.getvalue()

    def _build(self, outline: ParsedCustomOutline) -> Drawing:
        if outline.bounds is None:
            raise ValueError("Cannot export an outline without bounds")

        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for name, attrs in LAYERS.items():
            doc.layers.add(name, color=attrs["color"])
        msp = doc.modelspace()

        origin_x, origin_y = outline.bounds.min_x, outline.bounds.min_y
        for index, points in enumerate(outline.paths):
            if not _is_finite(points):
                logger.warning(f"Skipping path {index} with non-numeric coordinates")
                continue
            layer = "OUTLINE" if index == 0 else "CUTOUTS"
            shifted = [(p.x - origin_x, p.y - origin_y) for p in points]
            if len(shifted) == 2:
                msp.add_line(shifted[0], shifted[1], dxfattribs={"layer": layer})
            elif _is_closed(points):
                msp.add_lwpolyline(shifted[:-1], close=True, dxfattribs={"layer": layer})
            else:
                msp.add_lwpolyline(shifted, dxfattribs={"layer": layer})

        return doc


def render_outline_svg(outline: ParsedCustomOutline) -> str:
    """Render a 100x100 SVG preview of an outline.

    Points are scaled into the viewBox with Y flipped so the drawing's
    upward axis points up on screen. Returns an empty string when the
    outline has no bounds.
    """
    bounds = outline.bounds
    if bounds is None:
        return ""

    width = max(bounds.width, 1)
    height = max(bounds.height, 1)

    parts = ['<svg viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg">']
    for index, points in enumerate(outline.paths):
        if not points or not _is_finite(points):
            continue
        commands = []
        for position, point in enumerate(points):
            x = (point.x - bounds.min_x) / width * 100
            y = 100 - (point.y - bounds.min_y) / height * 100
            commands.append(f"{'M' if position == 0 else 'L'} {x:.3f} {y:.3f}")
        fill = PERIMETER_FILL if index == 0 else CUTOUT_FILL
        parts.append(
            f'<path d="{" ".join(commands)}" fill="{fill}" '
            f'stroke="{STROKE}" stroke-width="0.5"/>'
        )
    parts.append("</svg>")
    return "\n".join(parts)


def bounding_box_caption(outline: ParsedCustomOutline) -> str:
    """Human caption for an outline's bounding box, e.g. ``1200 x 800 mm``."""
    if outline.bounds is None:
        return ""
    return (
        f"{round_half_up(outline.bounds.width)} x "
        f"{round_half_up(outline.bounds.height)} mm"
    )
