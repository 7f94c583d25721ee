"""CLI commands for global configuration management."""

import typer

from commitgen import global_config
from commitgen.cli.utils import mask_key, require_provider
from commitgen.config import API_KEY_ENV_VARS, LLMProvider, load_config
from commitgen.llm import resolve_api_key

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitgen configuration in ~/.commitgen/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration and API key status."""
    try:
        settings = load_config()

        if global_config.is_configured():
            typer.echo("Current commitgen configuration (~/.commitgen/config.yaml):")
        else:
            typer.echo("No config file found, using defaults:")
        typer.echo()
        typer.echo(f"  Provider: {settings.provider.value}")
        typer.echo(f"  Max Tokens: {settings.max_tokens}")
        typer.echo(f"  Temperature: {settings.temperature}")
        typer.echo(f"  Max Diff Chars: {settings.max_diff_chars}")
        typer.echo(f"  Performance Log: {settings.log_file}")
        typer.echo()

        for provider in LLMProvider:
            env_var = API_KEY_ENV_VARS[provider]
            api_key = resolve_api_key(provider)
            status = mask_key(api_key) if api_key else "not set"
            typer.echo(f"  {provider.value} model: {settings.model_for(provider)}")
            typer.echo(f"  API Key ({env_var}): {status}")

    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help="Provider name (cohere or deepseek)"),
) -> None:
    """Set the preferred LLM provider."""
    llm_provider = require_provider(provider)

    try:
        global_config.set_active_provider(llm_provider)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to: {llm_provider.value}")


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(..., help="Provider name (cohere or deepseek)"),
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = require_provider(provider)
    env_var = API_KEY_ENV_VARS[llm_provider]

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)

    try:
        global_config.save_credential(env_var, api_key.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")
