"""Drawing upload endpoints."""

from fastapi import APIRouter

from tabletops.application.uploads import ingest_drawing
from tabletops.infrastructure.outline_export import render_outline_svg
from tabletops.web.schemas.common import BoundsSchema, OutlineSchema
from tabletops.web.schemas.requests import OutlineRequest
from tabletops.web.schemas.responses import OutlineResponse

router = APIRouter(prefix="/outline", tags=["outline"])


@router.post("", response_model=OutlineResponse)
async def parse_outline(request: OutlineRequest) -> OutlineResponse:
    """Parse an uploaded drawing into an outline with an SVG preview.

    DWG files are accepted without an outline.

    Raises:
        UnsupportedFileTypeError: Mapped to 400 by the registered handler.
        NoOutlineFoundError: Mapped to 422 by the registered handler.
    """
    details = ingest_drawing(request.file_name, request.content)
    outline = details.outline

    return OutlineResponse(
        file_name=details.file_name,
        file_size=details.file_size,
        size_label=details.size_label,
        file_type=details.file_type,
        uploaded_at=details.uploaded_at,
        notes=details.notes,
        preview_supported=details.preview_supported,
        preview_message=details.preview_message,
        outline=OutlineSchema.from_domain(outline) if outline else None,
        bounds=BoundsSchema.from_domain(outline.bounds) if outline and outline.bounds else None,
        svg=(render_outline_svg(outline) or None) if outline else None,
    )
