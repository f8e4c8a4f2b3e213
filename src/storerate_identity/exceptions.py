"""Identity and authentication exceptions.

These exceptions are raised by the storerate_identity package and are
translated to HTTP responses by the API exception handlers.
"""

from typing import Iterable

from storerate.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    FieldError,
    ValidationError,
)


class AuthError(DomainException):
    """Base exception for all authentication errors."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.UNAUTHENTICATED,
    ):
        super().__init__(message, code)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(
        self,
        message: str = "Password does not meet requirements",
        problems: Iterable[str] | None = None,
        field: str = "password",
    ):
        errors = [FieldError(field, problem) for problem in problems or [message]]
        super().__init__(message, errors=errors)


class IncorrectPasswordError(InvalidCredentialsError):
    """Raised when the current password given for a password change is wrong."""

    def __init__(self, message: str = "Current password is incorrect"):
        super().__init__(message)
