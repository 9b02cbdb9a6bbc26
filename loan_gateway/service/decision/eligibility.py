"""
Age Eligibility for the Loan Decision Engine.

An applicant must be an adult, and must be young enough that the longest
possible loan ends before the assumed life expectancy.
"""

import structlog

from .settings import DecisionSettings, decision_settings

logger = structlog.get_logger(__name__)

MINIMUM_AGE = 18


def max_eligible_age(settings: DecisionSettings = decision_settings) -> int:
    """
    Get the oldest age at which a loan can still be granted.

    Args:
        settings: Decision settings (uses defaults if not provided)

    Returns:
        life_expectancy minus the maximum loan period in whole years
    """
    return settings.life_expectancy - settings.maximum_loan_period // 12


def is_eligible_by_age(
    age: int,
    settings: DecisionSettings = decision_settings,
) -> bool:
    """
    Determine if an applicant's age allows a loan.

    Args:
        age: Applicant age in completed years
        settings: Decision settings (uses defaults if not provided)

    Returns:
        True if MINIMUM_AGE <= age <= max_eligible_age
    """
    max_age = max_eligible_age(settings)
    logger.debug("age_eligibility_checked", age=age, max_age=max_age)
    return MINIMUM_AGE <= age <= max_age
