"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from storerate.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    FieldError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            errors=[FieldError("email", "Please enter a valid email")],
        )


class InvalidRoleError(ValidationError):
    """Raised when a role value is not one of the known roles."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(
            f"Invalid role: {role}",
            code=ErrorCode.INVALID_ROLE,
            errors=[FieldError("role", "Invalid role")],
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email already in use",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class CannotDeleteSelfError(BusinessRuleViolation):
    """Cannot delete your own account."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot delete your own account",
            code=ErrorCode.CANNOT_DELETE_SELF,
        )


class CannotDemoteSelfError(BusinessRuleViolation):
    """Cannot change your own role."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot change your own role",
            code=ErrorCode.CANNOT_CHANGE_OWN_ROLE,
        )
