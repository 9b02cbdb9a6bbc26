"""Data transfer objects for loan decision operations."""

from dataclasses import dataclass
from typing import Optional

from loan_gateway.domain.entities import Decision


@dataclass(frozen=True)
class DecisionRequest:
    """Input data for requesting a loan decision."""
    personal_code: str
    loan_amount: int
    loan_period: int


@dataclass(frozen=True)
class DecisionResponse:
    """Response data for a loan decision."""

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str]
    decline_reason: Optional[str] = None

    @property
    def approved(self) -> bool:
        return self.error_message is None

    @classmethod
    def from_entity(cls, decision: Decision, decline_reason: Optional[str] = None) -> "DecisionResponse":
        return cls(
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            error_message=decision.error_message,
            decline_reason=decline_reason,
        )
