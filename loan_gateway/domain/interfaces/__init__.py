"""
Domain Interfaces (Ports)
"""

from .validators import PersonalCodeValidator

__all__ = [
    "PersonalCodeValidator",
]
