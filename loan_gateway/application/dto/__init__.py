"""Data Transfer Objects for application layer."""

from .decision import DecisionRequest, DecisionResponse

__all__ = [
    "DecisionRequest",
    "DecisionResponse",
]
