"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """Request model for asking a question about a block of text.

    Both fields default to empty so that missing values reach the answer
    service and are rejected with a 400 there.
    """

    text: str | None = Field(
        default=None,
        description="The document to answer from",
        json_schema_extra={"example": "The sky is blue. The grass is green."},
    )
    question: str | None = Field(
        default=None,
        description="The question to answer",
        json_schema_extra={"example": "What color is the grass?"},
    )


class AskResponse(BaseModel):
    """Response model for an answered question."""

    answer: str = Field(..., description="The generated answer")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


class ErrorResponse(BaseModel):
    """Error body returned for 4xx and 5xx responses.

    Example:
        {"error": "Server error", "details": "Embedding request failed."}
    """

    error: str = Field(..., description="Short error message")
    details: str | None = Field(None, description="Caller-safe detail for server errors")
