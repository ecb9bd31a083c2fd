"""Tests for the DXF outline parser.

Tests cover:
- LWPOLYLINE vertices, open and closed
- LINE start/end pairs, including partial points
- Skipping of unsupported entities
- Tolerance of junk input (never raises)
- Real DXF text written by ezdxf
"""

from __future__ import annotations

import math
from pathlib import Path

from tabletops.domain.services import OutlineParser, parse_dxf_outline
from tabletops.domain.value_objects import OutlineBounds, OutlinePoint


def dxf(*pairs: tuple[str, str]) -> str:
    """Join (code, value) pairs into DXF text."""
    return "\n".join(f"{code}\n{value}" for code, value in pairs)


SQUARE = dxf(
    ("0", "LWPOLYLINE"),
    ("70", "1"),
    ("10", "0"),
    ("20", "0"),
    ("10", "10"),
    ("20", "0"),
    ("10", "10"),
    ("20", "10"),
    ("10", "0"),
    ("20", "10"),
    ("0", "EOF"),
)


# =============================================================================
# LWPOLYLINE
# =============================================================================


class TestPolylines:
    def test_closed_square_repeats_first_vertex(self) -> None:
        outline = parse_dxf_outline(SQUARE)

        assert len(outline.paths) == 1
        path = outline.paths[0]
        assert len(path) == 5
        assert path[0] == path[-1] == OutlinePoint(0.0, 0.0)
        assert outline.bounds == OutlineBounds(0.0, 0.0, 10.0, 10.0)

    def test_open_polyline_keeps_vertices(self) -> None:
        text = dxf(
            ("0", "LWPOLYLINE"),
            ("70", "0"),
            ("10", "0"),
            ("20", "0"),
            ("10", "5"),
            ("20", "5"),
            ("10", "10"),
            ("20", "0"),
        )
        path = parse_dxf_outline(text).paths[0]

        assert [(p.x, p.y) for p in path] == [(0.0, 0.0), (5.0, 5.0), (10.0, 0.0)]

    def test_closed_flag_is_a_bit(self) -> None:
        """Flag 129 (closed + plinegen) still closes the ring."""
        text = SQUARE.replace("70\n1", "70\n129")
        assert len(parse_dxf_outline(text).paths[0]) == 5

    def test_polyline_without_vertices_dropped(self) -> None:
        text = dxf(("0", "LWPOLYLINE"), ("70", "1"), ("0", "EOF"))
        assert parse_dxf_outline(text).is_empty

    def test_unpaired_x_is_ignored(self) -> None:
        text = dxf(
            ("0", "LWPOLYLINE"),
            ("10", "1"),
            ("20", "2"),
            ("10", "3"),
            ("0", "EOF"),
        )
        path = parse_dxf_outline(text).paths[0]
        assert path == (OutlinePoint(1.0, 2.0),)


# =============================================================================
# LINE
# =============================================================================


class TestLines:
    def test_line_becomes_two_point_path(self) -> None:
        text = dxf(
            ("0", "LINE"),
            ("10", "1"),
            ("20", "2"),
            ("11", "3"),
            ("21", "4"),
        )
        outline = parse_dxf_outline(text)

        assert outline.paths == ((OutlinePoint(1.0, 2.0), OutlinePoint(3.0, 4.0)),)
        assert outline.bounds == OutlineBounds(1.0, 2.0, 3.0, 4.0)

    def test_line_missing_end_dropped(self) -> None:
        text = dxf(("0", "LINE"), ("10", "1"), ("20", "2"), ("0", "EOF"))
        assert parse_dxf_outline(text).is_empty

    def test_line_missing_one_axis_defaults_to_zero(self) -> None:
        text = dxf(("0", "LINE"), ("10", "7"), ("11", "3"), ("21", "4"))
        path = parse_dxf_outline(text).paths[0]
        assert path[0] == OutlinePoint(7.0, 0.0)


# =============================================================================
# Robustness
# =============================================================================


class TestRobustness:
    def test_empty_input(self) -> None:
        outline = parse_dxf_outline("")
        assert outline.is_empty
        assert outline.bounds is None

    def test_unsupported_entities_skipped(self) -> None:
        text = dxf(
            ("0", "CIRCLE"),
            ("10", "500"),
            ("20", "500"),
            ("40", "100"),
            ("0", "LINE"),
            ("10", "0"),
            ("20", "0"),
            ("11", "1"),
            ("21", "1"),
        )
        outline = parse_dxf_outline(text)
        assert len(outline.paths) == 1
        assert outline.bounds == OutlineBounds(0.0, 0.0, 1.0, 1.0)

    def test_non_numeric_value_becomes_nan(self) -> None:
        text = dxf(("0", "LINE"), ("10", "abc"), ("20", "0"), ("11", "1"), ("21", "1"))
        outline = parse_dxf_outline(text)

        assert math.isnan(outline.paths[0][0].x)
        assert outline.bounds is None

    def test_crlf_and_padding(self) -> None:
        text = SQUARE.replace("\n", "\r\n").replace("LWPOLYLINE", "  LWPOLYLINE  ")
        assert len(parse_dxf_outline(text).paths[0]) == 5

    def test_odd_trailing_line_ignored(self) -> None:
        outline = parse_dxf_outline(SQUARE + "\n0")
        assert len(outline.paths) == 1

    def test_paths_keep_drawing_order(self) -> None:
        line = dxf(("0", "LINE"), ("10", "0"), ("20", "0"), ("11", "1"), ("21", "0"))
        outline = parse_dxf_outline(SQUARE.replace("0\nEOF", line))

        assert len(outline.paths) == 2
        assert len(outline.paths[0]) == 5
        assert len(outline.paths[1]) == 2

    def test_binary_garbage_never_raises(self) -> None:
        outline = OutlineParser().parse("\x00\x01\n\xff\n0\n\n")
        assert outline.is_empty


# =============================================================================
# Real files
# =============================================================================


class TestRealDrawings:
    def test_ezdxf_document(self, square_dxf_text: str) -> None:
        """Header variables and tables are skipped; only the entity counts."""
        outline = parse_dxf_outline(square_dxf_text)

        assert len(outline.paths) == 1
        assert len(outline.paths[0]) == 5
        assert outline.bounds == OutlineBounds(0.0, 0.0, 1000.0, 600.0)

    def test_fixture_drawing(self, desk_dxf_path: Path) -> None:
        outline = parse_dxf_outline(desk_dxf_path.read_text())

        assert len(outline.paths) == 2
        assert outline.bounds is not None
        assert outline.bounds.width == 1800.0
        assert outline.bounds.height == 900.0
