"""Rating repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from storerate.domain.rating.aggregates import Rating
from storerate.domain.rating.value_objects import Score, SubmissionOutcome


class RatingRepository(ABC):
    """Repository interface for Rating aggregates."""

    @abstractmethod
    async def find_by_id(self, rating_id: UUID) -> Optional[Rating]:
        """Find a rating by its ID."""

    @abstractmethod
    async def find_by_user_and_store(
        self,
        user_id: UUID,
        store_id: UUID,
    ) -> Optional[Rating]:
        """Find the rating a user gave a store, if any."""

    @abstractmethod
    async def upsert(
        self,
        user_id: UUID,
        store_id: UUID,
        score: Score,
    ) -> tuple[Rating, SubmissionOutcome]:
        """Create the (user, store) rating or overwrite its score, atomically.

        Concurrent calls for the same pair never produce a second row.
        """

    @abstractmethod
    async def delete(self, rating_id: UUID) -> None:
        """Delete a rating by ID."""

    @abstractmethod
    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every rating a user authored."""

    @abstractmethod
    async def delete_by_store(self, store_id: UUID) -> int:
        """Delete every rating of a store."""

    @abstractmethod
    async def count(self) -> int:
        """Count total ratings."""
