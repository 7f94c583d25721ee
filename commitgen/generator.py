"""Commit message generation with a single provider fallback.

The preferred provider is tried first. If its call fails, or its cleaned
output is not a valid commit header, the other provider is tried exactly
once. When both fail the result is None; the causes are only visible in
the log output and the performance log.
"""

import logging
import time
from typing import Mapping, Optional

from commitgen.config import LLMProvider
from commitgen.llm.base import BaseLLMProvider
from commitgen.llm.exceptions import LLMError
from commitgen.message import ensure_valid, normalize
from commitgen.perf_log import PerformanceLogger

logger = logging.getLogger(__name__)


def other_provider(provider: LLMProvider) -> LLMProvider:
    """Return the fallback for a provider."""
    if provider == LLMProvider.COHERE:
        return LLMProvider.DEEPSEEK
    return LLMProvider.COHERE


def attempt_generation(
    provider: LLMProvider,
    client: Optional[BaseLLMProvider],
    prompt: str,
    perf_logger: Optional[PerformanceLogger] = None,
) -> str:
    """Run one provider: generate, normalize, validate, and log the attempt.

    Args:
        provider: Which provider this attempt is for.
        client: The provider instance, or None if it was never built.
        prompt: The generation prompt.
        perf_logger: Receives one record for this attempt.

    Returns:
        A validated commit message.

    Raises:
        LLMError: If the call fails or the output is not valid.
    """
    started = time.perf_counter()
    tokens_used = None
    message = None

    try:
        if client is None:
            raise LLMError(f"Provider {provider.value} is not configured")

        result = client.generate(prompt)
        tokens_used = result.tokens_used
        message = normalize(result.text)
        ensure_valid(message)
    except LLMError as e:
        if perf_logger is not None:
            perf_logger.record(
                provider=provider.value,
                duration_ms=(time.perf_counter() - started) * 1000,
                success=False,
                tokens_used=tokens_used,
                message=message,
                error=str(e),
            )
        raise

    if perf_logger is not None:
        perf_logger.record(
            provider=provider.value,
            duration_ms=(time.perf_counter() - started) * 1000,
            success=True,
            tokens_used=tokens_used,
            message=message,
        )
    return message


def generate_message(
    prompt: str,
    preferred: LLMProvider,
    providers: Mapping[LLMProvider, BaseLLMProvider],
    perf_logger: Optional[PerformanceLogger] = None,
) -> Optional[str]:
    """Generate a validated commit message, falling back once.

    Args:
        prompt: The generation prompt.
        preferred: The provider to try first.
        providers: Provider instances keyed by provider.
        perf_logger: Optional performance logger (one record per attempt).

    Returns:
        The commit message, or None if both providers failed.
    """
    try:
        return attempt_generation(preferred, providers.get(preferred), prompt, perf_logger)
    except LLMError as e:
        logger.warning("%s failed: %s", preferred.value, e)

    fallback = other_provider(preferred)
    logger.info("Falling back to %s", fallback.value)

    try:
        return attempt_generation(fallback, providers.get(fallback), prompt, perf_logger)
    except LLMError as e:
        logger.error("Error generating commit message with %s: %s", fallback.value, e)
        return None
