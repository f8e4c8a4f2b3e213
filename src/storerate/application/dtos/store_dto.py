"""Store read model."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from storerate.domain.store import Store


@dataclass(frozen=True)
class StoreDTO:
    """A store together with its computed average rating."""

    id: UUID
    name: str
    email: str
    address: str | None
    owner_id: UUID | None
    active: bool
    average_rating: float | None
    created_at: datetime
    updated_at: datetime
    rating_count: int | None = None

    @classmethod
    def from_store(
        cls,
        store: Store,
        average_rating: float | None,
        rating_count: int | None = None,
    ) -> "StoreDTO":
        return cls(
            id=store.id,
            name=store.name,
            email=store.email,
            address=store.address,
            owner_id=store.owner_id,
            active=store.active,
            average_rating=average_rating,
            rating_count=rating_count,
            created_at=store.created_at,
            updated_at=store.updated_at,
        )
