"""User read model."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from storerate_identity.domain.user import User


@dataclass(frozen=True)
class UserDTO:
    """A user without credentials.

    ``rating`` is only filled in for store owners: the average score of
    their store, None while it is unrated.
    """

    id: UUID
    name: str
    email: str
    address: str | None
    role: str
    created_at: datetime
    updated_at: datetime
    rating: float | None = None

    @classmethod
    def from_user(cls, user: User, rating: float | None = None) -> "UserDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            address=user.address,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
            rating=rating,
        )
