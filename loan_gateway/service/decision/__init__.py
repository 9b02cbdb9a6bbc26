"""
Loan Decision Module
"""

from .models import CreditSegment, LoanOffer, PersonalCodeInfo
from .settings import AMOUNT_STEP, PERIOD_STEP, DecisionSettings, decision_settings
from .personal_code import calculate_age, parse_birth_date, parse_personal_code
from .eligibility import MINIMUM_AGE, is_eligible_by_age, max_eligible_age
from .segments import classify_segment, credit_modifier
from .search import (
    CREDIT_SCORE_THRESHOLD,
    credit_score,
    find_approved_loan,
    find_max_loan_amount,
    is_loan_approved,
)
from .engine import DecisionEngine

__all__ = [
    # Settings
    "AMOUNT_STEP",
    "PERIOD_STEP",
    "DecisionSettings",
    "decision_settings",
    # Models
    "CreditSegment",
    "LoanOffer",
    "PersonalCodeInfo",
    # Personal Code
    "calculate_age",
    "parse_birth_date",
    "parse_personal_code",
    # Eligibility
    "MINIMUM_AGE",
    "is_eligible_by_age",
    "max_eligible_age",
    # Segments
    "classify_segment",
    "credit_modifier",
    # Search
    "CREDIT_SCORE_THRESHOLD",
    "credit_score",
    "find_approved_loan",
    "find_max_loan_amount",
    "is_loan_approved",
    # Engine
    "DecisionEngine",
]
