"""Embedding exceptions for askdoc."""

from .base import AskDocError


class EmbeddingError(AskDocError):
    """Failed to generate embeddings."""

    error_code = "ASK_EMB_001"


class EmbeddingAPIError(EmbeddingError):
    """Embedding API returned an error or a malformed response."""

    error_code = "ASK_EMB_002"


class EmbeddingRateLimitError(EmbeddingError):
    """Embedding API rate limit exceeded."""

    error_code = "ASK_EMB_003"


class EmbeddingTimeoutError(EmbeddingError):
    """Embedding request did not complete within the configured timeout."""

    error_code = "ASK_EMB_004"
