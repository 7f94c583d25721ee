"""Configuration for commitgen LLM providers.

Defaults live here; user overrides are read from ~/.commitgen/config.yaml.
Use 'commitgen config' commands to modify settings.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError


class LLMProvider(Enum):
    """Supported LLM providers."""

    COHERE = "cohere"
    DEEPSEEK = "deepseek"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.commitgen/config.yaml doesn't set them

DEFAULT_PROVIDER = LLMProvider.COHERE
DEFAULT_MAX_TOKENS = 50
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_DIFF_CHARS = 1500
DEFAULT_LOG_FILE = Path(".commitgen") / "performance.jsonl"

DEFAULT_MODELS = {
    LLMProvider.COHERE: "command-r",
    LLMProvider.DEEPSEEK: "deepseek-chat",
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.COHERE: "COHERE_API_KEY",
    LLMProvider.DEEPSEEK: "DEEPSEEK_API_KEY",
}


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[provider]


@dataclass
class Settings:
    """Effective settings for one run, after merging defaults and config.yaml."""

    provider: LLMProvider = DEFAULT_PROVIDER
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS
    log_file: Path = DEFAULT_LOG_FILE
    models: dict = field(default_factory=lambda: dict(DEFAULT_MODELS))

    def model_for(self, provider: LLMProvider) -> str:
        return self.models.get(provider) or DEFAULT_MODELS[provider]


class ConfigOverrides(BaseModel):
    """Typed view of the tunable keys read from config.yaml."""

    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0)
    max_diff_chars: Optional[int] = Field(default=None, ge=0)
    log_file: Optional[str] = None


def _describe_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def load_config() -> Settings:
    """Build the effective settings from the global config file.

    Unset keys keep their defaults.

    Returns:
        A Settings instance.

    Raises:
        GlobalConfigError: If config.yaml cannot be parsed or holds a value
            of the wrong type or range.
    """
    # Import here to avoid circular dependency
    from commitgen import global_config

    settings = Settings()

    try:
        overrides = ConfigOverrides(
            max_tokens=global_config.get_max_tokens(),
            temperature=global_config.get_temperature(),
            max_diff_chars=global_config.get_max_diff_chars(),
            log_file=global_config.get_log_file(),
        )
    except ValidationError as e:
        raise global_config.GlobalConfigError(
            f"Invalid value in {global_config.get_config_file_path()}: {_describe_errors(e)}"
        )

    provider = global_config.get_active_provider()
    if provider:
        settings.provider = provider
    if overrides.max_tokens is not None:
        settings.max_tokens = overrides.max_tokens
    if overrides.temperature is not None:
        settings.temperature = overrides.temperature
    if overrides.max_diff_chars is not None:
        settings.max_diff_chars = overrides.max_diff_chars
    if overrides.log_file:
        settings.log_file = Path(overrides.log_file).expanduser()

    for provider_enum, model in global_config.get_models().items():
        settings.models[provider_enum] = model

    return settings
