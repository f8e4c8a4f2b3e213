"""Shared domain building blocks (exceptions, time helpers)."""

from storerate.domain.shared.exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
    BusinessRuleViolation,
    ConcurrencyError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    FieldError,
    ValidationError,
)
from storerate.domain.shared.time import ensure_tz_aware, utc_now
from storerate.domain.shared.validation import InputValidator

__all__ = [
    "AccessDeniedError",
    "AuthenticationRequiredError",
    "BusinessRuleViolation",
    "ConcurrencyError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "FieldError",
    "InputValidator",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
