"""Rating listing port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from storerate.application.dtos import RatingDetailsDTO


class RatingReadPort(Protocol):
    """Ratings joined with author and store names."""

    async def list_ratings(
        self,
        *,
        user_id: UUID | None = None,
        store_id: UUID | None = None,
        limit: int | None = None,
    ) -> list[RatingDetailsDTO]:
        """List ratings newest first, optionally restricted to an author or store."""
        ...
