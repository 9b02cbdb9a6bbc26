"""
Data models for the loan decision pipeline.

These are the intermediate values passed between the pipeline steps,
from the parsed identity code to the final approvable loan offer.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class CreditSegment(str, Enum):
    """Credit risk segment derived from the last four digits of an identity code."""
    DEBT = "debt"            # Existing debt, no loan can be offered
    SEGMENT_1 = "segment_1"
    SEGMENT_2 = "segment_2"
    SEGMENT_3 = "segment_3"


@dataclass(frozen=True)
class PersonalCodeInfo:
    """
    The parts of a personal identity code the decision engine uses.

    Attributes:
        birth_date: Date of birth encoded in positions 1-7
        segment_value: Last four characters read as an unsigned integer (0-9999)
    """
    birth_date: date
    segment_value: int


@dataclass(frozen=True)
class LoanOffer:
    """
    An approvable (amount, period) pair found by the approval search.

    Attributes:
        loan_amount: Approved amount in euros
        loan_period: Approved period in months
    """
    loan_amount: int
    loan_period: int
