"""Retrieval exceptions for askdoc."""

from .base import AskDocError


class RetrievalError(AskDocError):
    """Error while scoring or selecting chunks."""

    error_code = "ASK_RET_001"


class DimensionMismatchError(RetrievalError):
    """Vectors compared within one request have different lengths."""

    error_code = "ASK_RET_002"
