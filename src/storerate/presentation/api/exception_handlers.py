"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent
error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE",
        "errors": [{"field": "...", "message": "..."}]   # validation only
    }

Usage:
    from storerate.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import asyncio
import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

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
from storerate_identity.exceptions import AuthError, IncorrectPasswordError

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_SCORE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ROLE: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    # 403 Forbidden
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.STORE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.RATING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_INACTIVE: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_ALREADY_OWNED: status.HTTP_409_CONFLICT,
    ErrorCode.CONCURRENCY_CONFLICT: status.HTTP_409_CONFLICT,
    # 400 Bad Request - business rule violations
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CANNOT_DELETE_SELF: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CANNOT_CHANGE_OWN_ROLE: status.HTTP_400_BAD_REQUEST,
    # 503 Service Unavailable - database timeouts and outages
    ErrorCode.SERVICE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    # A wrong current password is a bad request, not a failed login
    if isinstance(exc, IncorrectPasswordError):
        return status.HTTP_400_BAD_REQUEST

    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    # Fallback based on exception type hierarchy
    if isinstance(exc, (AuthError, AuthenticationRequiredError)):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, AccessDeniedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ConflictError, ConcurrencyError)):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, (ValidationError, BusinessRuleViolation)):
        return status.HTTP_400_BAD_REQUEST

    # Default to 400 for domain exceptions
    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    errors: list[FieldError] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict[str, Any] = {
        "detail": message,
        "code": code,
    }
    if errors is not None:
        content["errors"] = [error.to_dict() for error in errors]

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _field_errors_from_request(exc: RequestValidationError) -> list[FieldError]:
    errors = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" location prefix
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append(
            FieldError(
                field=".".join(location) or "body",
                message=error.get("msg", "Invalid value"),
            ),
        )
    return errors


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        a safe, user-friendly message to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            errors=exc.errors if isinstance(exc, ValidationError) else None,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Render malformed request bodies and parameters like domain validation."""
        errors = _field_errors_from_request(exc)
        logger.warning(
            "Request validation failed on %s %s: %d error(s)",
            request.method,
            request.url.path,
            len(errors),
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Invalid input",
            code=ErrorCode.VALIDATION_ERROR.value,
            errors=errors,
        )

    async def unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
        """Database timeouts and connection failures."""
        logger.error(
            "Database unavailable on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            message="Service temporarily unavailable",
            code=ErrorCode.SERVICE_UNAVAILABLE.value,
        )

    app.add_exception_handler(OperationalError, unavailable_handler)
    app.add_exception_handler(PoolTimeoutError, unavailable_handler)
    app.add_exception_handler(asyncio.TimeoutError, unavailable_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This is the catch-all handler for any exceptions not handled by
        the handlers above.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
