"""Main CLI command for suggesting a commit message."""

import logging
from typing import Optional

import typer

from commitgen import __version__
from commitgen.cli.utils import display_detailed_stats, require_provider
from commitgen.config import load_config
from commitgen.generator import generate_message
from commitgen.git import (
    GitError,
    NotARepositoryError,
    collect_changes,
    collect_staged_files,
)
from commitgen.global_config import GlobalConfigError
from commitgen.llm import build_prompt, build_providers
from commitgen.logging_config import configure_logging
from commitgen.perf_log import PerformanceLogger, resolve_log_file

logger = logging.getLogger(__name__)

NO_STAGED_CHANGES_MESSAGE = (
    "No staged changes found. Please stage your changes using git add first."
)
GENERATION_FAILED_MESSAGE = (
    "Failed to generate commit message. Please try again or write your message manually."
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitgen {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    detailed: bool = typer.Option(
        False,
        "--detailed",
        "-d",
        help="Show detailed statistics",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Interactive mode - choose from multiple suggestions (not implemented yet)",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="AI provider to use (cohere or deepseek)",
    ),
    max_diff_chars: Optional[int] = typer.Option(
        None,
        "--max-diff-chars",
        help="Maximum characters of the staged diff sent to the provider",
        min=0,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Generate a Conventional Commits message from staged changes."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    # Validate before touching git or the network
    preferred = require_provider(provider) if provider is not None else None

    configure_logging()

    try:
        settings = load_config()
    except GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    preferred = preferred or settings.provider
    diff_budget = settings.max_diff_chars if max_diff_chars is None else max_diff_chars

    if interactive:
        logger.debug("--interactive has no effect yet")

    try:
        summary = collect_changes()
        staged_files = collect_staged_files()

        if summary.is_empty:
            typer.echo("")
            typer.echo(NO_STAGED_CHANGES_MESSAGE)
            return

        prompt = build_prompt("\n".join(staged_files), summary.diff, diff_budget)
    except NotARepositoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    providers = build_providers(settings)
    perf_logger = PerformanceLogger(resolve_log_file(settings.log_file))

    typer.echo(f"Generating commit message with {preferred.value}...", err=True)
    message = generate_message(prompt, preferred, providers, perf_logger)

    if message:
        typer.echo("")
        typer.echo("Suggested commit message:")
        typer.echo(message)

        if detailed:
            display_detailed_stats(summary, staged_files)
    else:
        typer.echo("")
        typer.echo(GENERATION_FAILED_MESSAGE)
