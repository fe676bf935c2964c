"""
Custom exceptions and error handling for the trip service.

Every failure that reaches a caller is one of the exceptions below. Each one
carries an HTTP-like status code and an error code, so Lambda handlers can
render a consistent JSON error body without inspecting the exception type.

Usage:
    from core.errors import NotFoundError

    raise NotFoundError()  # 404, "trip not found"
"""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"

    # Saved trip errors
    TRIP_CONFLICT = "TRIP_CONFLICT"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"

    # Search provider errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information.",
    ErrorCode.INVALID_REQUEST: "Invalid request format.",
    ErrorCode.AUTH_FAILED: "API key is required",
    ErrorCode.TRIP_CONFLICT: "a trip with this apiId already exists",
    ErrorCode.TRIP_NOT_FOUND: "trip not found",
    ErrorCode.UPSTREAM_ERROR: "Internal server error",
    ErrorCode.INTERNAL_ERROR: "Internal server error",
}


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str


class TripServiceError(Exception):
    """Base exception for all trip service errors."""

    status_code: int = 500
    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str | None = None,
        code: ErrorCode | None = None,
        status_code: int | None = None,
    ):
        self.code = code or self.default_code
        self.message = message or USER_MESSAGES[self.code]
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(TripServiceError):
    """Input failed validation before reaching the core."""

    status_code = 400
    default_code = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
        code: ErrorCode | None = None,
    ):
        self.errors = list(errors or [])
        if message is None and self.errors:
            message = "; ".join(error.message for error in self.errors)
        super().__init__(message, code=code)


class AuthenticationError(TripServiceError):
    """API key missing or not recognised."""

    status_code = 401
    default_code = ErrorCode.AUTH_FAILED


class ConflictError(TripServiceError):
    """A saved trip with the same apiId already exists."""

    status_code = 409
    default_code = ErrorCode.TRIP_CONFLICT


class NotFoundError(TripServiceError):
    """No saved trip has the requested identity."""

    status_code = 404
    default_code = ErrorCode.TRIP_NOT_FOUND


class UpstreamError(TripServiceError):
    """The flight-search provider answered with an error status."""

    default_code = ErrorCode.UPSTREAM_ERROR

    def __init__(self, message: str | None = None, status_code: int = 500):
        super().__init__(message, status_code=status_code)


class InternalError(TripServiceError):
    """Any failure without a structured status. Message is always generic."""

    status_code = 500
    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self) -> None:
        super().__init__()
