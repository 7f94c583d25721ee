"""LLM-related exception classes.

Contains all exception classes for provider calls:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when the provider's API key is not set
- ProviderHTTPError: Raised when the provider API call fails
- EmptyResponseError: Raised when the response carries no candidate text
- InvalidCommitMessageError: Raised when the cleaned output fails validation
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class ProviderHTTPError(LLMError):
    """Raised when the provider API call fails (network or non-2xx)."""

    pass


class EmptyResponseError(LLMError):
    """Raised when the provider returns zero candidates."""

    pass


class InvalidCommitMessageError(LLMError):
    """Raised when generated text is not a valid conventional commit header."""

    pass
