"""Rating read model."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RatingDetailsDTO:
    """A rating joined with the names of its author and store."""

    id: UUID
    user_id: UUID
    store_id: UUID
    score: int
    user_name: str
    user_email: str
    store_name: str
    store_address: str | None
    created_at: datetime
    updated_at: datetime
