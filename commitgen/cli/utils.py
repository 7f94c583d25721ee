"""Shared helpers for CLI commands."""

from typing import Optional

import typer

from commitgen.config import LLMProvider
from commitgen.git import ChangeSummary

VALID_PROVIDERS = ", ".join(p.value for p in LLMProvider)


def parse_provider(value: str) -> Optional[LLMProvider]:
    """Parse a provider name, or return None if it is not supported."""
    try:
        return LLMProvider(value.strip().lower())
    except ValueError:
        return None


def require_provider(value: str) -> LLMProvider:
    """Parse a provider name or exit with status 1."""
    provider = parse_provider(value)
    if provider is None:
        typer.echo(f"Error: provider must be one of: {VALID_PROVIDERS} (got '{value}')", err=True)
        raise typer.Exit(1)
    return provider


def mask_key(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


def display_detailed_stats(summary: ChangeSummary, staged_files: list[str]) -> None:
    """Print change statistics and the staged file list."""
    typer.echo("")
    typer.echo("Change statistics:")
    typer.echo(f"Files changed: {len(staged_files)}")
    typer.echo(f"Lines added: {summary.additions}")
    typer.echo(f"Lines deleted: {summary.deletions}")

    if staged_files:
        typer.echo("")
        typer.echo("Changed files:")
        for path in staged_files:
            typer.echo(f"  • {path}")
