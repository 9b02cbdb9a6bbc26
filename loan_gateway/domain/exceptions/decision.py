"""Loan decision domain exceptions.

Two classes of failure exist. The ``Invalid*`` exceptions mean the request
itself was malformed. ``NoValidLoanException`` means the request was fine
but no loan can be offered to this applicant.
"""

from enum import Enum

from .base import DomainException


class InvalidPersonalCodeException(DomainException):
    """Raised when a personal identity code fails structural or checksum validation."""

    def __init__(self, message: str = "Invalid personal ID code!"):
        super().__init__(
            message=message,
            code="INVALID_PERSONAL_CODE",
        )


class InvalidLoanAmountException(DomainException):
    """Raised when the requested loan amount is outside the configured bounds."""

    def __init__(self, message: str = "Invalid loan amount!"):
        super().__init__(
            message=message,
            code="INVALID_LOAN_AMOUNT",
        )


class InvalidLoanPeriodException(DomainException):
    """Raised when the requested loan period is outside the configured bounds."""

    def __init__(self, message: str = "Invalid loan period!"):
        super().__init__(
            message=message,
            code="INVALID_LOAN_PERIOD",
        )


class NoValidLoanReason(str, Enum):
    """Why no loan could be offered."""
    AGE = "age"
    DEBT = "debt"
    NO_VALID_PERIOD = "no_valid_period"


_NO_VALID_LOAN_MESSAGES = {
    NoValidLoanReason.AGE: "Not eligible due to age.",
    NoValidLoanReason.DEBT: "No valid loan found!",
    NoValidLoanReason.NO_VALID_PERIOD: "No valid loan found within allowed loan periods.",
}


class NoValidLoanException(DomainException):
    """
    Raised when no loan can be offered to an otherwise valid request.

    The three business triggers (age, existing debt, no approvable period)
    share this single type and are told apart by ``reason``.
    """

    def __init__(self, reason: NoValidLoanReason):
        super().__init__(
            message=_NO_VALID_LOAN_MESSAGES[reason],
            code="NO_VALID_LOAN",
        )
        self.reason = reason
