"""Domain error codes for the accounts module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    INVALID_INPUT = "INVALID_INPUT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnauthenticatedError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.UNAUTHENTICATED, message="Unauthorized")


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_CREDENTIALS, message="Invalid email or password")


class EmailTakenError(DomainError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__(code=ErrorCode.EMAIL_TAKEN, message="An account with this email already exists")
        self.email = email


class InvalidInputError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)
