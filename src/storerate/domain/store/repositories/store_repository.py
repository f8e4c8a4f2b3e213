"""Store repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from storerate.domain.store.aggregates import Store


class StoreRepository(ABC):
    """Repository interface for Store aggregates."""

    @abstractmethod
    async def find_by_id(self, store_id: UUID) -> Optional[Store]:
        """Find a store by its ID."""

    @abstractmethod
    async def find_by_owner(self, owner_id: UUID) -> Optional[Store]:
        """Find the store owned by a user, active or not."""

    @abstractmethod
    async def find_active_by_owner(self, owner_id: UUID) -> Optional[Store]:
        """Find the owner's active store, if any."""

    @abstractmethod
    async def save(self, store: Store) -> None:
        """Save or update a store.

        Raises StoreAlreadyOwnedError when the owner already has another store.
        """

    @abstractmethod
    async def delete(self, store_id: UUID) -> None:
        """Delete a store together with its ratings."""

    @abstractmethod
    async def delete_by_owner(self, owner_id: UUID) -> int:
        """Delete the store owned by a user, with its ratings."""

    @abstractmethod
    async def list_all(
        self,
        limit: int | None = None,
        include_inactive: bool = True,
    ) -> list[Store]:
        """List stores by name."""

    @abstractmethod
    async def count(self) -> int:
        """Count total stores."""
