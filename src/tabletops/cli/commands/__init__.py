"""CLI command implementations for the tabletop configurator.

This package contains subcommands for the tabletop CLI, including:
- outline: Inspect an uploaded drawing
- materials: List a catalogue file
- quote: Resolve and price a configuration
"""

from tabletops.cli.commands.materials import materials_command
from tabletops.cli.commands.outline import outline_command
from tabletops.cli.commands.quote import quote_command

__all__ = ["materials_command", "outline_command", "quote_command"]
