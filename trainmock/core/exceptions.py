"""Custom exceptions for the train mock API."""

from http import HTTPStatus
from typing import Dict, Any, Optional


class MockError(Exception):
    """Base exception for the train mock API."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(MockError):
    """Request is missing a required field or carries a malformed one."""

    status_code = HTTPStatus.BAD_REQUEST


class SessionError(MockError):
    """Session cookie could not be read."""

    status_code = HTTPStatus.NOT_FOUND


class InternalError(MockError):
    """Token generation, encoding or another internal step failed."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


class InjectedFault(InternalError):
    """Failure deliberately raised by the fault injector."""

    pass


class PaymentError(InternalError):
    """Payment collaborator could not be notified."""

    pass


ERROR_MESSAGES = {
    "VALIDATION_MISSING_FIELD": "Required field is missing or empty",
    "VALIDATION_INVALID_FIELD": "Field has an invalid value",
    "VALIDATION_INVALID_BODY": "Request body could not be parsed",
    "VALIDATION_NEGATIVE_DELAY": "Delay must not be negative",
    "SESSION_INVALID": "Session cookie could not be decoded",
    "TOKEN_GENERATION_FAILED": "Could not generate anti-forgery token",
    "ENCODING_FAILED": "Could not encode response",
    "FAULT_INJECTED": "Injected fault",
    "PAYMENT_NOTIFY_FAILED": "Payment service notification failed",
    "INTERNAL_ERROR": "Internal server error",
}


def get_error_message(code: str) -> str:
    """Get the human-readable message for an error code."""
    return ERROR_MESSAGES.get(code, code)
