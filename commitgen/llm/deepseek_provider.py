"""DeepSeek provider implementation.

DeepSeek exposes an OpenAI-compatible chat completions API.
"""

from openai import OpenAI

from commitgen.config import LLMProvider
from commitgen.llm.base import BaseLLMProvider, LLMResult
from commitgen.llm.exceptions import ProviderHTTPError
from commitgen.llm.prompts import SYSTEM_PROMPT

# DeepSeek API base URL
DEEPSEEK_BASE_URL = "https://api.deepseek.com"


class DeepSeekProvider(BaseLLMProvider):
    """DeepSeek LLM provider (chat completions)."""

    provider = LLMProvider.DEEPSEEK
    default_model = "deepseek-chat"

    def generate(self, prompt: str) -> LLMResult:
        """Generate a commit message candidate using DeepSeek.

        Args:
            prompt: The full prompt, sent as the user message.

        Returns:
            An LLMResult with the first choice's content.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            ProviderHTTPError: If the API call fails.
            EmptyResponseError: If no choices are returned.
        """
        api_key = self.require_api_key()

        # Create an OpenAI client pointing to DeepSeek
        client = OpenAI(
            api_key=api_key,
            base_url=DEEPSEEK_BASE_URL,
        )

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                stop=["\n"],
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except Exception as e:
            raise ProviderHTTPError(f"DeepSeek API call failed: {e}")

        choices = response.choices or []
        text = self.first_candidate([c.message.content for c in choices])

        return LLMResult(
            text=text,
            model=self.model,
            tokens_used=response.usage.total_tokens if response.usage else None,
        )
