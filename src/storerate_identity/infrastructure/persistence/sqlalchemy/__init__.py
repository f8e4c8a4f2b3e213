"""SQLAlchemy persistence for identity (users table)."""

from storerate_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from storerate_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserModel",
    "UserRepositorySQLAlchemy",
]
