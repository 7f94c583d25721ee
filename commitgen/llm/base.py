"""Base classes shared by LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from commitgen.config import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    LLMProvider,
    get_api_key_env_var,
)
from commitgen.llm.exceptions import EmptyResponseError, MissingAPIKeyError


@dataclass
class LLMResult:
    """Result from an LLM generation call."""

    text: str
    model: str
    tokens_used: Optional[int] = None


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    Providers receive all of their configuration through the constructor.
    A missing API key is only reported when generate() is called, so a
    provider without credentials can still be built and used as a fallback
    target.
    """

    provider: LLMProvider
    default_model: str

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        """Initialize the provider.

        Args:
            api_key: The API key, or None if not configured.
            model: The model to use. Defaults to the provider's default model.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.
        """
        self.api_key = api_key
        self.model = model or self.default_model
        self.max_tokens = max_tokens
        self.temperature = temperature

    @property
    def provider_name(self) -> str:
        return self.provider.value

    def require_api_key(self) -> str:
        """Return the configured API key.

        Raises:
            MissingAPIKeyError: If no key was configured.
        """
        if self.api_key:
            return self.api_key

        env_var = get_api_key_env_var(self.provider)
        raise MissingAPIKeyError(
            f"{self.provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var}=your_key_here\n"
            f"  2. Run: commitgen config set-key {self.provider_name}\n"
            f"  3. Manually add to ~/.commitgen/credentials"
        )

    @staticmethod
    def first_candidate(candidates: list[Optional[str]]) -> str:
        """Return the first candidate text.

        Raises:
            EmptyResponseError: If there are no candidates or the first is empty.
        """
        if not candidates:
            raise EmptyResponseError("No candidates in provider response")
        text = candidates[0]
        if not text or not text.strip():
            raise EmptyResponseError("Provider returned an empty candidate")
        return text

    @abstractmethod
    def generate(self, prompt: str) -> LLMResult:
        """Generate a commit message candidate for the prompt.

        Args:
            prompt: The full prompt from build_prompt().

        Returns:
            An LLMResult holding the first candidate's raw text.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            ProviderHTTPError: If the API call fails.
            EmptyResponseError: If the response has no candidates.
        """
        pass
