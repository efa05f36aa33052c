"""LLM exceptions for askdoc."""

from .base import AskDocError


class LLMError(AskDocError):
    """Base error for LLM operations."""

    error_code = "ASK_LLM_001"


class LLMConnectionError(LLMError):
    """Failed to reach the LLM provider.

    Common causes:
    - Invalid API key
    - Network issues
    - Service unavailable
    """

    error_code = "ASK_LLM_002"


class LLMRateLimitError(LLMError):
    """Rate limit exceeded on LLM provider."""

    error_code = "ASK_LLM_003"


class LLMGenerationError(LLMError):
    """Provider answered but produced no usable text.

    Common causes:
    - Content filtered by safety settings
    - Token limit exceeded
    """

    error_code = "ASK_LLM_004"


class LLMTimeoutError(LLMError):
    """Generation did not complete within the configured timeout."""

    error_code = "ASK_LLM_005"
