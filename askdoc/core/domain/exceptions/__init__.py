"""Custom exception hierarchy for askdoc.

Each exception includes:
- Error codes for quick identification
- Automatic capture of class, method, file, and line number
- Cause chaining for underlying exceptions
- JSON serialization for structured logging

Import from this package directly:

    from askdoc.core.domain.exceptions import AskDocError, EmptyQuestionError
"""

# Base classes
from .base import AskDocError, ExceptionContext

# Configuration exceptions
from .configuration import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingAPIKeyError,
)

# Embedding exceptions
from .embedding import (
    EmbeddingAPIError,
    EmbeddingError,
    EmbeddingRateLimitError,
    EmbeddingTimeoutError,
)

# LLM exceptions
from .llm import (
    LLMConnectionError,
    LLMError,
    LLMGenerationError,
    LLMRateLimitError,
    LLMTimeoutError,
)

# Retrieval exceptions
from .retrieval import (
    DimensionMismatchError,
    RetrievalError,
)

# Pipeline failure
from .server import DEFAULT_PUBLIC_MESSAGE, ServerError

# Validation exceptions
from .validation import (
    EmptyDocumentError,
    EmptyQuestionError,
    MalformedRequestError,
    ValidationError,
)

__all__ = [
    # Base
    "ExceptionContext",
    "AskDocError",
    # Configuration
    "ConfigurationError",
    "MissingAPIKeyError",
    "InvalidConfigurationError",
    # Embedding
    "EmbeddingError",
    "EmbeddingAPIError",
    "EmbeddingRateLimitError",
    "EmbeddingTimeoutError",
    # LLM
    "LLMError",
    "LLMConnectionError",
    "LLMRateLimitError",
    "LLMGenerationError",
    "LLMTimeoutError",
    # Retrieval
    "RetrievalError",
    "DimensionMismatchError",
    # Pipeline
    "ServerError",
    "DEFAULT_PUBLIC_MESSAGE",
    # Validation
    "ValidationError",
    "EmptyDocumentError",
    "EmptyQuestionError",
    "MalformedRequestError",
]
