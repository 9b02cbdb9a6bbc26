"""Pydantic schemas for API request/response validation."""

from .decision import DecisionRequestSchema, DecisionResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "DecisionRequestSchema",
    "DecisionResponseSchema",
    "ErrorResponseSchema",
]
