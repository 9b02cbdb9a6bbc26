"""Domain Entities - Core business objects."""

from .decision import Decision

__all__ = [
    "Decision",
]
