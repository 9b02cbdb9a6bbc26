"""
Approval Search for the Loan Decision Engine.

Finds the best approvable (amount, period) pair for a credit modifier.

Credit score:
    score = (credit_modifier / loan_amount) * loan_period / 10
    A pair is approvable when score >= 0.1.

The search is a two-phase greedy walk rather than a joint optimization:
the largest amount is fixed at the requested period first, and only then
is the period extended. Amount is preferred over duration, and the step
sizes are fixed so results stay comparable across deployments.
"""

from loan_gateway.domain.exceptions import NoValidLoanException, NoValidLoanReason

from .models import LoanOffer
from .settings import (
    AMOUNT_STEP,
    PERIOD_STEP,
    DecisionSettings,
    decision_settings,
)

CREDIT_SCORE_THRESHOLD = 0.1


def credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """Calculate the credit score for an (amount, period) pair."""
    return (credit_modifier / loan_amount) * loan_period / 10


def is_loan_approved(credit_modifier: int, loan_amount: int, loan_period: int) -> bool:
    """Check whether an (amount, period) pair reaches the approval threshold."""
    return credit_score(credit_modifier, loan_amount, loan_period) >= CREDIT_SCORE_THRESHOLD


def find_max_loan_amount(
    credit_modifier: int,
    loan_period: int,
    settings: DecisionSettings = decision_settings,
) -> int:
    """
    Find the largest approvable amount at a fixed period.

    Scans minimum_loan_amount..maximum_loan_amount in AMOUNT_STEP increments.

    Args:
        credit_modifier: Applicant credit modifier (> 0)
        loan_period: Period to evaluate, in months
        settings: Decision settings (uses defaults if not provided)

    Returns:
        Largest approvable amount, or minimum_loan_amount if none is
        approvable (the caller must re-check approval)
    """
    max_amount = settings.minimum_loan_amount

    for amount in range(
        settings.minimum_loan_amount,
        settings.maximum_loan_amount + 1,
        AMOUNT_STEP,
    ):
        if is_loan_approved(credit_modifier, amount, loan_period):
            max_amount = amount

    return max_amount


def find_approved_loan(
    credit_modifier: int,
    loan_period: int,
    settings: DecisionSettings = decision_settings,
) -> LoanOffer:
    """
    Find the best approvable loan for a credit modifier.

    Algorithm:
        1. Take the largest approvable amount at the requested period
           (minimum_loan_amount if nothing qualifies)
        2. While that amount is not approvable, extend the period by
           PERIOD_STEP months, up to maximum_loan_period
        3. Fail if the period runs past maximum_loan_period

    Args:
        credit_modifier: Applicant credit modifier (> 0; debt is handled upstream)
        loan_period: Requested period in months, already within bounds
        settings: Decision settings (uses defaults if not provided)

    Returns:
        LoanOffer with the approved amount and period

    Raises:
        NoValidLoanException: If no period up to the maximum makes the
            amount approvable
    """
    loan_amount = find_max_loan_amount(credit_modifier, loan_period, settings)

    while (
        not is_loan_approved(credit_modifier, loan_amount, loan_period)
        and loan_period <= settings.maximum_loan_period
    ):
        loan_period += PERIOD_STEP

    if loan_period > settings.maximum_loan_period:
        raise NoValidLoanException(NoValidLoanReason.NO_VALID_PERIOD)

    return LoanOffer(loan_amount=loan_amount, loan_period=loan_period)
