"""Outline command for inspecting uploaded drawings.

Parses a DXF (or accepts a DWG as an attachment), reports the outline and
optionally writes an SVG preview or a cleaned-up DXF.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from tabletops.application.uploads import CustomShapeDetails, ingest_drawing
from tabletops.domain.exceptions import DrawingUploadError
from tabletops.infrastructure.outline_export import (
    OutlineDxfExporter,
    bounding_box_caption,
    render_outline_svg,
)


def outline_command(
    drawing: Annotated[
        Path,
        typer.Argument(help="Path to a .dxf or .dwg drawing"),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the parsed outline as JSON"),
    ] = False,
    svg_output: Annotated[
        Path | None,
        typer.Option("--svg", help="Write an SVG preview of the outline"),
    ] = None,
    dxf_output: Annotated[
        Path | None,
        typer.Option("--export-dxf", help="Write the outline as a DXF starting at the origin"),
    ] = None,
) -> None:
    """Parse a drawing and report its outline.

    Exit codes:
        0 - Drawing accepted (DWG files are accepted without an outline)
        1 - File missing, unsupported, or without a usable outline

    Example:
        tabletop outline desk.dxf --svg desk.svg
    """
    if not drawing.exists():
        typer.echo(f"Error: File not found: {drawing}", err=True)
        raise typer.Exit(code=1)

    try:
        details = ingest_drawing(drawing.name, drawing.read_bytes())
    except DrawingUploadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(_details_to_dict(details), indent=2))
    else:
        _display_details(details)

    if details.outline is None:
        if svg_output or dxf_output:
            typer.echo("Error: No outline available to export.", err=True)
            raise typer.Exit(code=1)
        return

    if svg_output:
        svg_output.write_text(render_outline_svg(details.outline), encoding="utf-8")
        typer.echo(f"SVG preview: {svg_output}")

    if dxf_output:
        try:
            OutlineDxfExporter().export(details.outline, dxf_output)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"DXF outline: {dxf_output}")


def _details_to_dict(details: CustomShapeDetails) -> dict:
    return {
        "fileName": details.file_name,
        "fileSize": details.file_size,
        "fileType": details.file_type,
        "uploadedAt": details.uploaded_at,
        "notes": details.notes,
        "previewSupported": details.preview_supported,
        "outline": details.outline.to_dict() if details.outline else None,
    }


def _display_details(details: CustomShapeDetails) -> None:
    typer.echo(f"{details.file_name} ({details.size_label})")
    typer.echo(details.notes)
    if details.preview_message:
        typer.echo(f"Warning: {details.preview_message}", err=True)
    if details.outline is None:
        return
    typer.echo(f"Paths: {len(details.outline.paths)}")
    caption = bounding_box_caption(details.outline)
    if caption:
        typer.echo(f"Bounding box: {caption}")
    else:
        typer.echo("Bounding box: unavailable (non-numeric coordinates)")
