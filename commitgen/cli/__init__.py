"""CLI entry point for commitgen.

Combines the default generate command and the config subcommands into a
single typer application.
"""

import typer

from commitgen.cli.config import config_app
from commitgen.cli.main import main_command

# Main application
app = typer.Typer(
    name="commitgen",
    help="commitgen: AI-suggested Conventional Commits messages for staged changes",
    add_completion=False,
)

app.add_typer(config_app, name="config")

# Default behavior when no subcommand is given
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
