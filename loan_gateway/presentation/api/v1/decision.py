"""Loan decision API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from loan_gateway.application.dto import DecisionRequest
from loan_gateway.application.services import DecisionService
from loan_gateway.core.dependencies import get_decision_service
from loan_gateway.core.metrics import record_decision, track_decision_latency
from loan_gateway.presentation.schemas import (
    DecisionRequestSchema,
    DecisionResponseSchema,
    ErrorResponseSchema,
)

decision_router = APIRouter(
    prefix="/loan",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid personal code, amount or period"},
    },
)


@decision_router.post(
    "/decision",
    response_model=DecisionResponseSchema,
    status_code=200,
    summary="Request Loan Decision",
    description="""Calculate the largest loan amount and the period that can be approved""",
    responses={
        200: {"description": "Decision processed (approved, or declined with a message)"},
    },
)
async def create_decision(
    request: DecisionRequestSchema,
    decision_service: Annotated[DecisionService, Depends(get_decision_service)],
) -> DecisionResponseSchema:
    """
    Request a loan decision for an applicant.

    Returns the approved amount and period, or an error message when no
    loan can be offered.
    """
    dto = DecisionRequest(
        personal_code=request.personal_code,
        loan_amount=request.loan_amount,
        loan_period=request.loan_period,
    )

    with track_decision_latency():
        response = decision_service.make_decision(dto)

    record_decision(response.loan_amount, response.loan_period, response.decline_reason)

    return DecisionResponseSchema(
        loan_amount=response.loan_amount,
        loan_period=response.loan_period,
        error_message=response.error_message,
    )
