"""
Decision Engine for the Loan Decision Service.

This module orchestrates the complete decision-making process:
1. Validate the request (personal code, amount, period)
2. Check age eligibility from the birth date in the personal code
3. Classify the credit segment and look up its modifier
4. Search for the best approvable amount and period
5. Build and return the final decision

The engine keeps no state between calls. The credit modifier is passed
explicitly from classification to the search, so one engine instance can
serve any number of concurrent callers.
"""

from datetime import date
from typing import Callable

import structlog

from loan_gateway.domain.entities import Decision
from loan_gateway.domain.exceptions import (
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
    NoValidLoanException,
    NoValidLoanReason,
)
from loan_gateway.domain.interfaces import PersonalCodeValidator

from .eligibility import is_eligible_by_age
from .models import PersonalCodeInfo
from .personal_code import calculate_age, parse_personal_code
from .search import find_approved_loan
from .segments import classify_segment, credit_modifier
from .settings import DecisionSettings, decision_settings

logger = structlog.get_logger(__name__)


class DecisionEngine:
    """
    Calculates the maximum loan amount and period that can be approved.
    """

    def __init__(
        self,
        validator: PersonalCodeValidator,
        settings: DecisionSettings = decision_settings,
        today: Callable[[], date] = date.today,
    ):
        self._validator = validator
        self._settings = settings
        self._today = today

    def calculate_approved_loan(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int,
    ) -> Decision:
        """
        Decide the best loan that can be approved for a request.

        Decision Logic:
            - Malformed request: raise the matching Invalid* exception
            - Too young or too old: no valid loan
            - Debt segment: no valid loan
            - Otherwise: largest approvable amount at the requested period,
              extending the period if even the minimum amount fails

        Args:
            personal_code: Applicant's personal identity code
            loan_amount: Requested amount in euros
            loan_period: Requested period in months

        Returns:
            Approved Decision with the loan amount and period

        Raises:
            InvalidPersonalCodeException: If the personal code is invalid
            InvalidLoanAmountException: If the amount is outside the allowed range
            InvalidLoanPeriodException: If the period is outside the allowed range
            NoValidLoanException: If no loan can be offered
        """
        log = logger.bind(loan_amount=loan_amount, loan_period=loan_period)

        code_info = self.verify_inputs(personal_code, loan_amount, loan_period)

        segment = classify_segment(code_info.segment_value)
        modifier = credit_modifier(segment, self._settings)

        if modifier == 0:
            log.info("no_valid_loan", reason=NoValidLoanReason.DEBT.value)
            raise NoValidLoanException(NoValidLoanReason.DEBT)

        try:
            offer = find_approved_loan(modifier, loan_period, self._settings)
        except NoValidLoanException as exc:
            log.info("no_valid_loan", reason=exc.reason.value, segment=segment.value)
            raise

        log.info(
            "loan_approved",
            segment=segment.value,
            approved_amount=offer.loan_amount,
            approved_period=offer.loan_period,
        )
        return Decision.approved(offer.loan_amount, offer.loan_period)

    def verify_inputs(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int,
    ) -> PersonalCodeInfo:
        """
        Verify that all inputs satisfy the business rules.

        Request format is checked before age, so a malformed request is
        always reported as such even for an ineligible applicant.

        Returns:
            The parsed personal code

        Raises:
            InvalidPersonalCodeException: If the personal code is invalid
            InvalidLoanAmountException: If the amount is outside the allowed range
            InvalidLoanPeriodException: If the period is outside the allowed range
            NoValidLoanException: If the applicant's age is not eligible
        """
        settings = self._settings

        if not self._validator.is_valid(personal_code):
            raise InvalidPersonalCodeException()

        if not settings.minimum_loan_amount <= loan_amount <= settings.maximum_loan_amount:
            raise InvalidLoanAmountException()

        if not settings.minimum_loan_period <= loan_period <= settings.maximum_loan_period:
            raise InvalidLoanPeriodException()

        code_info = parse_personal_code(personal_code)
        age = calculate_age(code_info.birth_date, self._today())

        if not is_eligible_by_age(age, settings):
            logger.info("no_valid_loan", reason=NoValidLoanReason.AGE.value, age=age)
            raise NoValidLoanException(NoValidLoanReason.AGE)

        return code_info
