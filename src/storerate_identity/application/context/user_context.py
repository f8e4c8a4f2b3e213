"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from storerate_identity.domain.user.value_objects import UserRole

if TYPE_CHECKING:
    from storerate_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Immutable identity of the current authenticated caller."""

    user_id: UUID
    name: str
    email: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_store_owner(self) -> bool:
        return self.role == UserRole.STORE_OWNER

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
        )

    @classmethod
    def from_values(
        cls,
        user_id: UUID,
        name: str,
        email: str,
        role: UserRole | str = UserRole.USER,
    ) -> UserContext:
        return cls(user_id=user_id, name=name, email=email, role=UserRole(role))

    def __str__(self) -> str:
        return f"UserContext({self.email})"
