"""Decision service - orchestrates the loan decision use case."""

import structlog

from loan_gateway.application.dto import DecisionRequest, DecisionResponse
from loan_gateway.domain.entities import Decision
from loan_gateway.domain.exceptions import NoValidLoanException
from loan_gateway.service.decision import DecisionEngine

logger = structlog.get_logger(__name__)


class DecisionService:
    """
    Application service for loan decision use cases.

    The engine reports every failure as a typed exception. This service is
    the one place where "no valid loan" becomes a regular decision carrying
    an error message; malformed requests keep propagating to the caller.
    """

    def __init__(self, decision_engine: DecisionEngine):
        self._engine = decision_engine

    def make_decision(self, request: DecisionRequest) -> DecisionResponse:
        """
        Process a loan decision request.

        Args:
            request: The decision request with personal code, amount and period

        Returns:
            DecisionResponse with the approved amount and period, or an
            error message when no loan can be offered

        Raises:
            InvalidPersonalCodeException: If the personal code is invalid
            InvalidLoanAmountException: If the amount is outside the allowed range
            InvalidLoanPeriodException: If the period is outside the allowed range
        """
        log = logger.bind(
            personal_code=mask_personal_code(request.personal_code),
            loan_amount=request.loan_amount,
            loan_period=request.loan_period,
        )
        log.info("decision_requested")

        decline_reason = None

        try:
            decision = self._engine.calculate_approved_loan(
                request.personal_code,
                request.loan_amount,
                request.loan_period,
            )
        except NoValidLoanException as exc:
            log.info("decision_declined", reason=exc.reason.value)
            decision = Decision.declined(exc.message)
            decline_reason = exc.reason.value
        else:
            log.info(
                "decision_made",
                approved_amount=decision.loan_amount,
                approved_period=decision.loan_period,
            )

        return DecisionResponse.from_entity(decision, decline_reason)


def mask_personal_code(personal_code: str) -> str:
    """Hide everything but the century digit and the last two digits."""
    if len(personal_code) < 4:
        return "*" * len(personal_code)
    return personal_code[0] + "*" * (len(personal_code) - 3) + personal_code[-2:]
