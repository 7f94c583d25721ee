"""LLM provider module for commitgen.

Providers are built once per run from explicit settings and handed to the
fallback orchestrator; nothing here keeps module-level client state.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from commitgen.config import LLMProvider, Settings, get_api_key_env_var
from commitgen.llm.base import BaseLLMProvider, LLMResult
from commitgen.llm.exceptions import (
    EmptyResponseError,
    InvalidCommitMessageError,
    LLMError,
    MissingAPIKeyError,
    ProviderHTTPError,
)
from commitgen.llm.prompts import SYSTEM_PROMPT, build_prompt

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()


def resolve_api_key(provider: LLMProvider) -> Optional[str]:
    """Look up the API key for a provider.

    Checks the environment variable first, then ~/.commitgen/credentials.

    Returns:
        The key, or None if it is not configured anywhere.
    """
    env_var = get_api_key_env_var(provider)
    api_key = os.getenv(env_var)
    if api_key:
        return api_key

    from commitgen.global_config import GlobalConfigError, get_credential

    try:
        return get_credential(env_var)
    except GlobalConfigError as e:
        logger.warning("Could not read credentials file: %s", e)
        return None


def get_provider(
    provider: LLMProvider,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to build.
        api_key: The API key (may be None; checked at generate time).
        model: The model to use. Defaults to the provider's default.
        max_tokens: Maximum tokens to generate.
        temperature: Sampling temperature.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    kwargs = {"api_key": api_key, "model": model}
    if max_tokens is not None:
        kwargs["max_tokens"] = max_tokens
    if temperature is not None:
        kwargs["temperature"] = temperature

    if provider == LLMProvider.COHERE:
        from commitgen.llm.cohere_provider import CohereProvider

        return CohereProvider(**kwargs)

    elif provider == LLMProvider.DEEPSEEK:
        from commitgen.llm.deepseek_provider import DeepSeekProvider

        return DeepSeekProvider(**kwargs)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


def build_providers(settings: Settings) -> dict[LLMProvider, BaseLLMProvider]:
    """Build every supported provider from the run's settings.

    Credentials are read once here.
    """
    return {
        provider: get_provider(
            provider,
            api_key=resolve_api_key(provider),
            model=settings.model_for(provider),
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
        )
        for provider in LLMProvider
    }


__all__ = [
    "BaseLLMProvider",
    "LLMResult",
    "LLMError",
    "MissingAPIKeyError",
    "ProviderHTTPError",
    "EmptyResponseError",
    "InvalidCommitMessageError",
    "SYSTEM_PROMPT",
    "build_prompt",
    "build_providers",
    "get_provider",
    "resolve_api_key",
]
