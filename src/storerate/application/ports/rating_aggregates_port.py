"""Rating aggregates port.

Averages, counts and distributions are always derived from the ratings
table at read time; nothing here is stored.
"""

from __future__ import annotations

from typing import Iterable, Protocol
from uuid import UUID

from storerate.application.dtos import ScoreCount


class RatingAggregatesPort(Protocol):
    """Derived rating figures per store."""

    async def average_rating(self, store_id: UUID) -> float | None:
        """Arithmetic mean of the store's scores, None when unrated."""
        ...

    async def rating_count(self, store_id: UUID) -> int:
        """Number of ratings of the store."""
        ...

    async def rating_distribution(self, store_id: UUID) -> list[ScoreCount]:
        """Per-score counts, highest score first, zero counts omitted."""
        ...

    async def averages_for_stores(
        self,
        store_ids: Iterable[UUID],
    ) -> dict[UUID, float | None]:
        """Average rating for each store id in one query."""
        ...

    async def averages_for_owners(
        self,
        owner_ids: Iterable[UUID],
    ) -> dict[UUID, float | None]:
        """Average rating of each owner's active store in one query."""
        ...
