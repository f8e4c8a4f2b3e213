from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.domain.store import StoreNotFoundError
from storerate_identity.domain.access import AccessPolicy, Action

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class DeleteStoreCommand:
    """Delete a store and all of its ratings."""

    def __init__(
        self,
        store_repository: StoreRepository,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteStoreCommand:
        return cls(
            store_repository=factory.store_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, store_id: UUID) -> None:
        AccessPolicy.enforce(self._current_user, Action.DELETE_STORE)

        store = await self._store_repo.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)

        await self._store_repo.delete(store.id)
        logger.info("Store deleted: %s (%s)", store.id, store.name)
