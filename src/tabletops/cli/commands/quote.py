"""Quote command: resolve a configuration and price it."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from tabletops.application.config import (
    ConfigError,
    ConfiguratorSettings,
    config_to_catalogue,
    config_to_tabletop,
    load_catalogue,
    load_settings,
    settings_to_estimator,
)
from tabletops.application.price_estimator import EstimateState, PriceUpdate
from tabletops.application.session import ConfiguratorSession
from tabletops.domain.entities import TabletopConfig
from tabletops.domain.exceptions import DrawingUploadError
from tabletops.domain.services.constraint_resolver import FieldChanged, ShapeChanged
from tabletops.domain.value_objects import TableShape
from tabletops.infrastructure.catalogue_feed import InMemoryCatalogueFeed


def quote_command(
    settings_path: Annotated[
        Path | None,
        typer.Option("--settings", "-s", help="Path to a settings JSON file"),
    ] = None,
    catalogue_path: Annotated[
        Path | None,
        typer.Option("--catalogue", "-c", help="Path to a catalogue JSON file"),
    ] = None,
    material_id: Annotated[
        str | None,
        typer.Option("--material-id", "-m", help="Catalogue material to select"),
    ] = None,
    shape: Annotated[
        TableShape | None,
        typer.Option("--shape", help="Tabletop shape"),
    ] = None,
    length: Annotated[
        int | None,
        typer.Option("--length", "-l", help="Length in mm"),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Width in mm"),
    ] = None,
    thickness: Annotated[
        int | None,
        typer.Option("--thickness", "-t", help="Thickness in mm (snapped to what is available)"),
    ] = None,
    edge_radius: Annotated[
        int | None,
        typer.Option("--edge-radius", help="Corner radius in mm for rounded rectangles"),
    ] = None,
    quantity: Annotated[
        int | None,
        typer.Option("--quantity", "-q", help="Number of tabletops"),
    ] = None,
    outline_path: Annotated[
        Path | None,
        typer.Option("--outline", help="DXF drawing for a custom shape"),
    ] = None,
    remote: Annotated[
        bool,
        typer.Option("--remote/--local", help="Ask the pricing service for the final price"),
    ] = True,
) -> None:
    """Resolve a tabletop configuration and print its price.

    Values outside the allowed ranges are clamped, and thickness is snapped
    to the nearest available size, exactly as the configurator would.

    Exit codes:
        0 - Priced (possibly with a local fallback estimate)
        1 - Settings, catalogue, material or drawing could not be used

    Example:
        tabletop quote --shape round --length 1200 --thickness 20 --local
    """
    try:
        settings = load_settings(settings_path) if settings_path else ConfiguratorSettings()
        if catalogue_path is None and settings.catalogue_path:
            catalogue_path = Path(settings.catalogue_path)
        catalogue = config_to_catalogue(load_catalogue(catalogue_path)) if catalogue_path else []
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    changes = [
        ("length_mm", length),
        ("width_mm", width),
        ("thickness_mm", thickness),
        ("edge_radius_mm", edge_radius),
        ("quantity", quantity),
    ]

    async def run() -> tuple[TabletopConfig, tuple[int, ...], PriceUpdate]:
        session = ConfiguratorSession(
            config_to_tabletop(settings.defaults),
            estimator=settings_to_estimator(settings, remote=remote),
        )
        try:
            if catalogue:
                session.connect_catalogue(InMemoryCatalogueFeed(catalogue))
            session.start()
            if material_id:
                session.select_material(material_id)
            if outline_path:
                session.upload_drawing(outline_path.name, outline_path.read_bytes())
            if shape is not None:
                session.dispatch(ShapeChanged(shape))
            for name, value in changes:
                if value is not None:
                    session.dispatch(FieldChanged(name, value))
            update = await session.estimator.wait_settled()
            return session.config, session.available_thicknesses, update
        finally:
            session.close()

    try:
        config, thicknesses, update = asyncio.run(run())
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(code=1)
    except (DrawingUploadError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _display_quote(config, thicknesses, update)


def _display_quote(
    config: TabletopConfig, thicknesses: tuple[int, ...], update: PriceUpdate
) -> None:
    available = ", ".join(str(t) for t in thicknesses)
    typer.echo("Configuration:")
    typer.echo(f"  Shape:       {config.shape.value}")
    typer.echo(f"  Dimensions:  {config.length_mm} x {config.width_mm} mm")
    typer.echo(f"  Thickness:   {config.thickness_mm} mm (available: {available})")
    if config.shape == TableShape.ROUNDED_RECT:
        typer.echo(f"  Edge radius: {config.edge_radius_mm} mm")
    typer.echo(
        f"  Material:    {config.material.value} / {config.finish.value}, "
        f"{config.edge_profile.value}"
    )
    typer.echo(f"  Quantity:    {config.quantity}")
    typer.echo("")

    quote = update.quote
    if quote is None:
        typer.echo("Price: unavailable")
        return
    typer.echo(f"Price: ${quote.price:,} {quote.currency} ({quote.source.value})")
    if update.state == EstimateState.DEGRADED and update.error:
        typer.echo(f"Warning: {update.error}", err=True)
