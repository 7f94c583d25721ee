"""Cohere provider implementation."""

import cohere

from commitgen.config import LLMProvider
from commitgen.llm.base import BaseLLMProvider, LLMResult
from commitgen.llm.exceptions import ProviderHTTPError


class CohereProvider(BaseLLMProvider):
    """Cohere LLM provider using the v2 chat endpoint.

    The whole prompt is sent as a single user message; the model's reply
    content items are the candidates.
    """

    provider = LLMProvider.COHERE
    default_model = "command-r"

    def generate(self, prompt: str) -> LLMResult:
        """Generate a commit message candidate using Cohere.

        Args:
            prompt: The full prompt.

        Returns:
            An LLMResult with the first content item's text.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            ProviderHTTPError: If the API call fails.
            EmptyResponseError: If the reply has no text.
        """
        api_key = self.require_api_key()

        client = cohere.ClientV2(api_key=api_key)

        try:
            response = client.chat(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                k=0,
                stop_sequences=["\n"],
            )
        except Exception as e:
            raise ProviderHTTPError(f"Cohere API call failed: {e}")

        message = getattr(response, "message", None)
        content = (getattr(message, "content", None) or []) if message else []
        text = self.first_candidate([getattr(item, "text", None) for item in content])

        return LLMResult(
            text=text,
            model=self.model,
            tokens_used=_used_tokens(response),
        )


def _used_tokens(response) -> int | None:
    usage = getattr(response, "usage", None)
    tokens = getattr(usage, "tokens", None) if usage else None
    if tokens is None:
        return None
    total = (tokens.input_tokens or 0) + (tokens.output_tokens or 0)
    return int(total)
