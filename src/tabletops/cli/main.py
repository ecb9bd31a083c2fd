"""Typer CLI for the tabletop configurator."""

import logging
from typing import Annotated

import typer

from tabletops.cli.commands import materials_command, outline_command, quote_command

app = typer.Typer(
    name="tabletop",
    help="Configure, inspect and price custom tabletops.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


app.command(name="outline")(outline_command)
app.command(name="materials")(materials_command)
app.command(name="quote")(quote_command)


if __name__ == "__main__":
    app()
