"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
to enable centralized exception handling in the presentation layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_SCORE = "INVALID_SCORE"
    INVALID_ROLE = "INVALID_ROLE"

    # Authentication Errors (401)
    UNAUTHENTICATED = "UNAUTHENTICATED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Authorization Errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    STORE_NOT_FOUND = "STORE_NOT_FOUND"
    RATING_NOT_FOUND = "RATING_NOT_FOUND"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    STORE_INACTIVE = "STORE_INACTIVE"
    STORE_ALREADY_OWNED = "STORE_ALREADY_OWNED"
    CONCURRENCY_CONFLICT = "CONCURRENCY_CONFLICT"

    # Business Rule Violations
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    CANNOT_DELETE_SELF = "CANNOT_DELETE_SELF"
    CANNOT_CHANGE_OWN_ROLE = "CANNOT_CHANGE_OWN_ROLE"

    # Backing store errors (503)
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    This exception provides structured error information that can be
    used by the presentation layer to generate consistent API responses.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


@dataclass(frozen=True)
class FieldError:
    """A single invalid input field."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ValidationError(DomainException):
    """Raised when input validation fails.

    Carries every invalid field at once so clients can fix all of them
    in a single round trip.
    """

    def __init__(
        self,
        message: str = "Invalid input",
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
        errors: Iterable[FieldError] | None = None,
    ) -> None:
        super().__init__(message, code, details)
        self.errors: list[FieldError] = list(errors or [])

    @classmethod
    def for_field(
        cls,
        field: str,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ) -> "ValidationError":
        return cls(message, code=code, errors=[FieldError(field, message)])


class BusinessRuleViolation(DomainException):
    """Raised when a business rule is violated."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConcurrencyError(DomainException):
    """Raised when concurrent modifications conflict."""

    def __init__(
        self,
        message: str = "The resource was modified by another request",
        code: ErrorCode = ErrorCode.CONCURRENCY_CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class AuthenticationRequiredError(DomainException):
    """Raised when an operation needs a verified identity and has none."""

    def __init__(
        self,
        message: str = "Authentication required",
        code: ErrorCode = ErrorCode.UNAUTHENTICATED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class AccessDeniedError(DomainException):
    """Raised when a verified identity is not allowed to perform an action."""

    def __init__(
        self,
        message: str = "Not authorized to perform this action",
        code: ErrorCode = ErrorCode.FORBIDDEN,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
