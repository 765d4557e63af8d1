"""CLI entry point for splitnote.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from splitnote.cli.chunks import chunks_command
from splitnote.cli.config import config_app
from splitnote.cli.main import main_command

# Main application
app = typer.Typer(
    name="splitnote",
    help="splitnote: AI commit messages for diffs of any size",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("chunks")(chunks_command)

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "chunks_command",
    "main_command",
]
