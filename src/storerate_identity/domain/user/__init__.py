"""User domain manages identity, profile and role.

This domain handles:
- User aggregate (id, name, email, address, role)
- Email and role value objects
- Input rules for new accounts and passwords
"""

from storerate_identity.domain.user.aggregates import User
from storerate_identity.domain.user.exceptions import (
    CannotDeleteSelfError,
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidRoleError,
    UserNotFoundError,
)
from storerate_identity.domain.user.repositories import UserRepository
from storerate_identity.domain.user.validation import (
    password_problems,
    validate_new_user,
)
from storerate_identity.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "CannotDeleteSelfError",
    "CannotDemoteSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidRoleError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "password_problems",
    "validate_new_user",
]
