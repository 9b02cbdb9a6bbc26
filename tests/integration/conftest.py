"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- Decision engine pinned to a fixed evaluation date
- Test client whose engine fails unexpectedly
- Request bodies for each credit segment
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from loan_gateway.main import app
from loan_gateway.core.dependencies import get_decision_engine
from loan_gateway.infrastructure.validators import EstonianPersonalCodeValidator
from loan_gateway.service.decision import DecisionEngine, DecisionSettings


# =============================================================================
# Test Data
# =============================================================================

TODAY = date(2025, 6, 1)


def decision_request(personal_code: str, loan_amount: int = 4000, loan_period: int = 12) -> dict:
    """Build a request body for POST /v1/loan/decision."""
    return {
        "personal_code": personal_code,
        "loan_amount": loan_amount,
        "loan_period": loan_period,
    }


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def decision_settings() -> DecisionSettings:
    """Default decision settings."""
    return DecisionSettings()


@pytest.fixture
def fixed_date_engine(decision_settings: DecisionSettings) -> DecisionEngine:
    """Decision engine whose clock always reads TODAY."""
    return DecisionEngine(
        validator=EstonianPersonalCodeValidator(),
        settings=decision_settings,
        today=lambda: TODAY,
    )


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    fixed_date_engine: DecisionEngine,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with the decision engine pinned to TODAY.

    Age-dependent outcomes stay stable no matter when the suite runs.
    """
    def override_get_decision_engine():
        return fixed_date_engine

    app.dependency_overrides[get_decision_engine] = override_get_decision_engine

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


class BrokenDecisionEngine:
    """Engine stand-in that fails with an unexpected error."""

    def calculate_approved_loan(self, personal_code: str, loan_amount: int, loan_period: int):
        raise RuntimeError("engine exploded")


@pytest_asyncio.fixture
async def failing_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose decision engine raises an unexpected error.

    Server errors are returned as responses instead of being re-raised.
    """
    app.dependency_overrides[get_decision_engine] = BrokenDecisionEngine

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def debtor_request() -> dict:
    """Applicant in the debt segment."""
    return decision_request("37605030299")


@pytest.fixture
def segment_1_request() -> dict:
    """Applicant in segment 1 (modifier 100)."""
    return decision_request("50307172740")


@pytest.fixture
def segment_2_request() -> dict:
    """Applicant in segment 2 (modifier 300)."""
    return decision_request("38411266610")


@pytest.fixture
def segment_3_request() -> dict:
    """Applicant in segment 3 (modifier 1000)."""
    return decision_request("35006069515")
