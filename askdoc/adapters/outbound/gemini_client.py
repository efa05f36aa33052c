"""Shared google-genai client used by the embedding and LLM adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...core.domain.exceptions import MissingAPIKeyError

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

RATE_LIMIT_MARKERS = (
    "quota",
    "rate limit",
    "rate_limit",
    "resource_exhausted",
    "too many requests",
)


class GeminiClientProvider:
    """Lazily creates one ``genai.Client`` and hands it to adapters.

    The client is read-only after creation and safe to share between
    concurrent requests.
    """

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key
        self._client: genai.Client | None = None

    def get(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Get one at https://aistudio.google.com/ "
                    "and set GOOGLE_API_KEY in your .env file."
                )

            from google import genai

            self._client = genai.Client(api_key=self.api_key)
            logger.info("Gemini client initialized")
        return self._client


def is_rate_limit_error(exc: Exception) -> bool:
    """True for HTTP 429 responses or quota/rate messages from the SDK."""
    if getattr(exc, "code", None) == 429:
        return True
    message = str(exc).lower()
    return any(marker in message for marker in RATE_LIMIT_MARKERS)
