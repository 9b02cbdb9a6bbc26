"""Personal code validator implementations."""

from .personal_code_validator import EstonianPersonalCodeValidator, calculate_check_digit

__all__ = [
    "EstonianPersonalCodeValidator",
    "calculate_check_digit",
]
