"""Tests for drawing upload ingestion."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from tabletops.application.uploads import (
    DWG_NOTES,
    DWG_PREVIEW_MESSAGE,
    DXF_NOTES,
    file_extension,
    format_bytes,
    ingest_drawing,
)
from tabletops.domain.exceptions import (
    DrawingUploadError,
    NoOutlineFoundError,
    UnsupportedFileTypeError,
)


class TestFormatBytes:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [(0, "0 B"), (512, "512 B"), (1536, "1.5 kB"), (2 * 1024 * 1024, "2.00 MB")],
    )
    def test_labels(self, size: int, expected: str) -> None:
        assert format_bytes(size) == expected


class TestIngestDrawing:
    def test_dxf_parsed(self, desk_dxf_path: Path) -> None:
        content = desk_dxf_path.read_bytes()
        details = ingest_drawing("desk.dxf", content)

        assert details.file_type == "dxf"
        assert details.file_size == len(content)
        assert details.notes == DXF_NOTES
        assert details.preview_supported is True
        assert details.preview_message is None
        assert details.outline is not None
        assert len(details.outline.paths) == 2

    def test_timestamp_recorded(self, desk_dxf_path: Path) -> None:
        when = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
        details = ingest_drawing("desk.dxf", desk_dxf_path.read_text(), uploaded_at=when)
        assert details.uploaded_at == "2024-05-01T09:30:00+00:00"

    def test_dwg_accepted_without_outline(self) -> None:
        details = ingest_drawing("Plan.DWG", b"AC1032\x00\x00")

        assert details.file_type == "dwg"
        assert details.outline is None
        assert details.preview_supported is False
        assert details.notes == DWG_NOTES
        assert details.preview_message == DWG_PREVIEW_MESSAGE
        assert details.size_label == "8 B"

    def test_unsupported_extension(self) -> None:
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            ingest_drawing("desk.pdf", b"%PDF")
        assert exc_info.value.extension == "pdf"
        assert "DXF or DWG" in str(exc_info.value)

    def test_dxf_without_paths(self) -> None:
        with pytest.raises(NoOutlineFoundError, match="empty.dxf"):
            ingest_drawing("empty.dxf", "0\nSECTION\n2\nENTITIES\n0\nENDSEC\n0\nEOF\n")

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(DrawingUploadError):
            ingest_drawing("notes.txt", "hello")

    def test_invalid_utf8_tolerated(self) -> None:
        content = b"0\nLINE\n10\n0\n20\n0\n11\n5\n21\n5\n999\n\xff\xfe\n"
        details = ingest_drawing("line.dxf", content)
        assert details.outline.bounds.max_x == 5.0


class TestFileExtension:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.dxf", "dxf"), ("A.DXF", "dxf"), ("archive.tar.dwg", "dwg"), ("README", "")],
    )
    def test_extension(self, name: str, expected: str) -> None:
        assert file_extension(name) == expected
