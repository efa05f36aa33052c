"""Pipeline failure surfaced to callers of the answer service."""

from typing import Any

from .base import AskDocError

DEFAULT_PUBLIC_MESSAGE = "An error occurred while answering the question."


class ServerError(AskDocError):
    """A pipeline stage failed after validation passed.

    ``message`` is the internal description meant for logs; ``public_message``
    is the short text that may be returned to the caller.
    """

    error_code = "ASK_SRV_001"

    def __init__(
        self,
        message: str,
        *,
        stage: str = "unknown",
        public_message: str = DEFAULT_PUBLIC_MESSAGE,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, cause=cause, context={"stage": stage, **(context or {})})
        self.stage = stage
        self.public_message = public_message
