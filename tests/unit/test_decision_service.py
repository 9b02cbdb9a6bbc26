"""
Unit Tests for DecisionService.

These tests verify:
1. Approved decisions pass through unchanged
2. No-valid-loan outcomes become declined responses with a message
3. Malformed requests keep propagating as exceptions
4. Personal codes are masked before logging
"""

from datetime import date

import pytest

from loan_gateway.application.dto import DecisionRequest
from loan_gateway.application.services import DecisionService
from loan_gateway.application.services.decision_service import mask_personal_code
from loan_gateway.domain.exceptions import InvalidLoanPeriodException, InvalidPersonalCodeException
from loan_gateway.infrastructure.validators import EstonianPersonalCodeValidator
from loan_gateway.service.decision import DecisionEngine, DecisionSettings


@pytest.fixture
def service() -> DecisionService:
    engine = DecisionEngine(
        validator=EstonianPersonalCodeValidator(),
        settings=DecisionSettings(),
        today=lambda: date(2025, 6, 1),
    )
    return DecisionService(decision_engine=engine)


class TestMakeDecision:
    """Tests for DecisionService.make_decision()."""

    def test_approved(self, service: DecisionService):
        response = service.make_decision(DecisionRequest("38411266610", 4000, 12))

        assert response.approved is True
        assert response.loan_amount == 3600
        assert response.loan_period == 12
        assert response.error_message is None
        assert response.decline_reason is None

    def test_debtor_declined(self, service: DecisionService):
        response = service.make_decision(DecisionRequest("37605030299", 4000, 12))

        assert response.approved is False
        assert response.loan_amount is None
        assert response.loan_period is None
        assert response.error_message == "No valid loan found!"
        assert response.decline_reason == "debt"

    def test_age_declined(self, service: DecisionService):
        response = service.make_decision(DecisionRequest("61001010009", 4000, 12))

        assert response.error_message == "Not eligible due to age."
        assert response.decline_reason == "age"

    def test_invalid_code_propagates(self, service: DecisionService):
        with pytest.raises(InvalidPersonalCodeException):
            service.make_decision(DecisionRequest("12345678901", 4000, 12))

    def test_invalid_period_propagates(self, service: DecisionService):
        with pytest.raises(InvalidLoanPeriodException):
            service.make_decision(DecisionRequest("38411266610", 4000, 70))


class TestMaskPersonalCode:
    """Tests for mask_personal_code()."""

    def test_masks_birth_date_and_sequence(self):
        assert mask_personal_code("38411266610") == "3********10"

    def test_short_input_fully_masked(self):
        assert mask_personal_code("123") == "***"
