"""Domain error codes for the checkout module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    VERIFICATION_FAILED = "VERIFICATION_FAILED"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnauthenticatedError(DomainError):
    """Raised when the caller has no valid session."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNAUTHENTICATED,
            message="Unauthorized: Please log in",
        )


class UnauthorizedError(DomainError):
    """Raised when the session user differs from the purchase intent's user."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.UNAUTHORIZED,
            message="Session mismatch: Unauthorized",
        )


class InvalidArgumentError(DomainError):
    """Raised for malformed or out-of-range input."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_ARGUMENT, message=message)


class EventNotFoundError(DomainError):
    """Raised when the referenced event does not exist."""

    def __init__(self, event_id: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message="Event not found")
        self.event_id = event_id


class VerificationFailedError(DomainError):
    """Raised when a payment signature does not match."""

    def __init__(self, order_id: str, payment_id: str) -> None:
        super().__init__(
            code=ErrorCode.VERIFICATION_FAILED,
            message="Payment verification failed",
        )
        self.order_id = order_id
        self.payment_id = payment_id


class PersistenceFailedError(DomainError):
    """Raised when a verified payment could not be recorded as a booking.

    The gateway has already captured the money, so callers must treat this
    as a charge that needs manual reconciliation, not as a failed payment.
    """

    def __init__(self, details: str, hint: str | None = None, db_code: str | None = None) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILED,
            message="Payment successful but booking failed.",
        )
        self.details = details
        self.hint = hint
        self.db_code = db_code


class UpstreamError(DomainError):
    """Raised when the gateway or its configuration is unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.UPSTREAM_ERROR, message=message)
