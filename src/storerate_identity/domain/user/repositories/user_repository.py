"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from storerate_identity.domain.user.aggregates.user import User
from storerate_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates and their credentials."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User, password_hash: str | None = None) -> None:
        """Save or update a user.

        ``password_hash`` is required when the user is new and ignored
        otherwise; use ``set_password_hash`` to change it.
        """

    @abstractmethod
    async def get_password_hash(self, user_id: UUID) -> Optional[str]:
        """Return the stored bcrypt hash, or None for an unknown user."""

    @abstractmethod
    async def set_password_hash(self, user_id: UUID, password_hash: str) -> None:
        """Replace the stored bcrypt hash."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

    @abstractmethod
    async def list_all(self, limit: int | None = None) -> list[User]:
        """List users, newest first."""
