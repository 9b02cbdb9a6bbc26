"""Decision entity representing the outcome of a loan request."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Decision:
    """
    Represents a loan decision.

    Exactly one of two shapes is valid:
    - approved: ``loan_amount`` and ``loan_period`` set, no ``error_message``
    - declined: ``error_message`` set, no amount or period
    """

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        has_offer = self.loan_amount is not None and self.loan_period is not None
        has_partial_offer = (self.loan_amount is None) != (self.loan_period is None)

        if has_partial_offer:
            raise ValueError("loan_amount and loan_period must be set together")
        if has_offer == (self.error_message is not None):
            raise ValueError("a decision carries either an offer or an error message")

    @classmethod
    def approved(cls, loan_amount: int, loan_period: int) -> "Decision":
        """Build an approved decision."""
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def declined(cls, error_message: str) -> "Decision":
        """Build a decision that explains why no loan is offered."""
        return cls(error_message=error_message)

    @property
    def is_approved(self) -> bool:
        return self.error_message is None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "loan_amount": self.loan_amount,
            "loan_period": self.loan_period,
            "error_message": self.error_message,
        }
