"""Ingestion of uploaded drawing files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Literal

from tabletops.domain.exceptions import NoOutlineFoundError, UnsupportedFileTypeError
from tabletops.domain.services.outline_parser import OutlineParser
from tabletops.domain.value_objects import ParsedCustomOutline

logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS: tuple[str, ...] = ("dxf", "dwg")

DXF_NOTES = "DXF parsed successfully."
DWG_NOTES = "DWG uploads are stored for reference. Convert to DXF to preview the outline."
DWG_PREVIEW_MESSAGE = (
    "DWG previews are not available yet. Please convert to DXF for visualization."
)


def format_bytes(size: int) -> str:
    """Format a file size for display (``512 B``, ``1.5 kB``, ``2.00 MB``)."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} kB"
    return f"{size / (1024 * 1024):.2f} MB"


@dataclass(frozen=True)
class CustomShapeDetails:
    """Metadata kept for an uploaded drawing.

    Attributes:
        file_name: Original file name.
        file_size: Size in bytes.
        file_type: "dxf" or "dwg".
        uploaded_at: ISO-8601 upload timestamp.
        outline: Parsed outline; always None for DWG.
        notes: Human-readable status note.
        preview_supported: False when the outline cannot be previewed.
    """

    file_name: str
    file_size: int
    file_type: Literal["dxf", "dwg"]
    uploaded_at: str
    outline: ParsedCustomOutline | None
    notes: str
    preview_supported: bool = True

    @property
    def size_label(self) -> str:
        return format_bytes(self.file_size)

    @property
    def preview_message(self) -> str | None:
        return None if self.preview_supported else DWG_PREVIEW_MESSAGE


def file_extension(file_name: str) -> str:
    return PurePath(file_name).suffix.lstrip(".").lower()


def ingest_drawing(
    file_name: str,
    content: bytes | str,
    parser: OutlineParser | None = None,
    uploaded_at: datetime | None = None,
) -> CustomShapeDetails:
    """Validate and parse an uploaded drawing.

    Args:
        file_name: Name of the uploaded file, used for the extension check.
        content: Raw file contents.
        parser: Outline parser to use (default: a new OutlineParser).
        uploaded_at: Upload time (default: now, UTC).

    Returns:
        Details for the upload. DWG files are accepted as attachments with
        no outline and ``preview_supported=False``.

    Raises:
        UnsupportedFileTypeError: If the extension is not dxf or dwg.
        NoOutlineFoundError: If a DXF yields no paths.
    """
    extension = file_extension(file_name)
    if extension not in ACCEPTED_EXTENSIONS:
        logger.warning(f"Rejected upload {file_name!r}: unsupported extension")
        raise UnsupportedFileTypeError(file_name, extension, ACCEPTED_EXTENSIONS)

    raw = content.encode("utf-8") if isinstance(content, str) else content
    timestamp = (uploaded_at or datetime.now(timezone.utc)).isoformat()

    if extension == "dwg":
        logger.info(f"Stored DWG {file_name!r} without outline preview")
        return CustomShapeDetails(
            file_name=file_name,
            file_size=len(raw),
            file_type="dwg",
            uploaded_at=timestamp,
            outline=None,
            notes=DWG_NOTES,
            preview_supported=False,
        )

    text = content if isinstance(content, str) else raw.decode("utf-8", errors="replace")
    outline = (parser or OutlineParser()).parse(text)
    if outline.is_empty:
        logger.warning(f"No usable outline in {file_name!r}")
        raise NoOutlineFoundError(file_name)

    logger.info(f"Parsed {len(outline.paths)} path(s) from {file_name!r}")
    return CustomShapeDetails(
        file_name=file_name,
        file_size=len(raw),
        file_type="dxf",
        uploaded_at=timestamp,
        outline=outline,
        notes=DXF_NOTES,
    )
