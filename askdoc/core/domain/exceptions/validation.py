"""Validation exceptions for askdoc."""

from .base import AskDocError


class ValidationError(AskDocError):
    """Input validation failed."""

    error_code = "ASK_VAL_001"


class EmptyDocumentError(ValidationError):
    """Document text is missing or empty."""

    error_code = "ASK_VAL_002"


class EmptyQuestionError(ValidationError):
    """Question is missing or empty."""

    error_code = "ASK_VAL_003"


class MalformedRequestError(ValidationError):
    """Request body could not be parsed into text and question."""

    error_code = "ASK_VAL_004"
