"""Materials command for listing a catalogue file."""

from pathlib import Path
from typing import Annotated

import typer

from tabletops.application.config import ConfigError, config_to_catalogue, load_catalogue
from tabletops.domain.services import ThicknessCatalogResolver, effective_limits
from tabletops.domain.value_objects import TableShape


def materials_command(
    catalogue_path: Annotated[
        Path,
        typer.Argument(help="Path to a catalogue JSON file"),
    ],
) -> None:
    """List catalogue materials with their effective limits and thicknesses.

    Example:
        tabletop materials catalogue.json
    """
    try:
        materials = config_to_catalogue(load_catalogue(catalogue_path))
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not materials:
        typer.echo("No materials in catalogue.")
        return

    thicknesses = ThicknessCatalogResolver()
    for material in materials:
        limits = effective_limits(TableShape.RECT, material)
        available = ", ".join(str(t) for t in thicknesses.available_for(material))
        typer.echo(f"{material.name} [{material.id}]")
        typer.echo(f"  Type:       {material.material_type or '-'} / {material.finish or '-'}")
        typer.echo(f"  Max size:   {limits.max_length} x {limits.max_width} mm")
        typer.echo(f"  Thickness:  {available} mm")
