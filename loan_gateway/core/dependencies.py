"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from loan_gateway.application.services import DecisionService
from loan_gateway.domain.interfaces import PersonalCodeValidator
from loan_gateway.infrastructure.validators import EstonianPersonalCodeValidator
from loan_gateway.service.decision import DecisionEngine, DecisionSettings
from loan_gateway.service.decision.settings import get_decision_settings


# Validator dependencies
def get_personal_code_validator() -> PersonalCodeValidator:
    """Get a PersonalCodeValidator instance."""
    return EstonianPersonalCodeValidator()


# Engine dependencies
def get_decision_engine(
    validator: Annotated[PersonalCodeValidator, Depends(get_personal_code_validator)],
    settings: Annotated[DecisionSettings, Depends(get_decision_settings)],
) -> DecisionEngine:
    """Get a DecisionEngine wired with the validator and decision settings."""
    return DecisionEngine(validator=validator, settings=settings)


# Service dependencies
def get_decision_service(
    decision_engine: Annotated[DecisionEngine, Depends(get_decision_engine)],
) -> DecisionService:
    """Get a DecisionService instance with all dependencies."""
    return DecisionService(decision_engine=decision_engine)
