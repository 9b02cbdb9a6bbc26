"""Loan decision Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DecisionRequestSchema(BaseModel):
    """Schema for POST /v1/loan/decision request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "personal_code": "38411266610",
                    "loan_amount": 4000,
                    "loan_period": 12,
                }
            ]
        }
    )
    personal_code: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="Applicant's personal identity code",
        examples=["38411266610"],
    )
    loan_amount: int = Field(
        ...,
        description="Requested loan amount in euros",
        examples=[4000],
    )
    loan_period: int = Field(
        ...,
        description="Requested loan period in months",
        examples=[12],
    )

    @field_validator("personal_code")
    @classmethod
    def strip_personal_code(cls, v: str) -> str:
        """Ignore surrounding whitespace in the personal code."""
        return v.strip()


class DecisionResponseSchema(BaseModel):
    """Schema for POST /v1/loan/decision response body."""

    loan_amount: Optional[int] = Field(
        None,
        description="Approved loan amount in euros (null if no loan can be offered)",
        examples=[3600],
    )
    loan_period: Optional[int] = Field(
        None,
        description="Approved loan period in months (null if no loan can be offered)",
        examples=[12],
    )
    error_message: Optional[str] = Field(
        None,
        description="Why no loan can be offered (null if approved)",
        examples=[None],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "loan_amount": 3600,
                    "loan_period": 12,
                    "error_message": None,
                },
                {
                    "loan_amount": None,
                    "loan_period": None,
                    "error_message": "No valid loan found!",
                },
            ]
        }
    )
