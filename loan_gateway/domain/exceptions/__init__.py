"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .decision import (
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
    NoValidLoanException,
    NoValidLoanReason,
)

__all__ = [
    "DomainException",
    "InvalidPersonalCodeException",
    "InvalidLoanAmountException",
    "InvalidLoanPeriodException",
    "NoValidLoanException",
    "NoValidLoanReason",
]
