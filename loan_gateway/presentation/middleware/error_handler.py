"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from loan_gateway.core.metrics import record_invalid_request
from loan_gateway.domain.exceptions import (
    DomainException,
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
    NoValidLoanException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InvalidPersonalCodeException)
    @app.exception_handler(InvalidLoanAmountException)
    @app.exception_handler(InvalidLoanPeriodException)
    async def invalid_request_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle malformed loan requests."""
        logger.info(
            "invalid_loan_request",
            request_id=get_request_id(),
            code=exc.code,
        )
        record_invalid_request(exc.code)
        return _error_response(400, exc)

    @app.exception_handler(NoValidLoanException)
    async def no_valid_loan_handler(
        request: Request,
        exc: NoValidLoanException,
    ) -> JSONResponse:
        """Handle a no-valid-loan outcome that was not turned into a decision."""
        logger.info(
            "no_valid_loan",
            request_id=get_request_id(),
            reason=exc.reason.value,
        )
        return JSONResponse(
            status_code=200,
            content={
                "loan_amount": None,
                "loan_period": None,
                "error_message": exc.message,
            },
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        # Runs outside RequestContextMiddleware, after the context var is reset
        request_id = get_request_id() or getattr(request.state, "request_id", None)
        logger.exception(
            "unhandled_exception",
            request_id=request_id,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": request_id,
            },
        )
