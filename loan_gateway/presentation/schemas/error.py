"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["INVALID_LOAN_AMOUNT"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Invalid loan amount!"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_PERSONAL_CODE",
                    "message": "Invalid personal ID code!",
                    "request_id": "abc123",
                }
            ]
        }
    }
