from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.domain.shared.exceptions import ValidationError
from storerate.domain.shared.validation import InputValidator
from storerate.domain.store import Store, StoreNotFoundError
from storerate_identity.domain.access import AccessPolicy, Action, Resource

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class UpdateStoreCommand:
    """Update store details; allowed for admins and the store's owner."""

    def __init__(
        self,
        store_repository: StoreRepository,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateStoreCommand:
        return cls(
            store_repository=factory.store_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        store_id: UUID,
        name: str | None = None,
        email: str | None = None,
        address: str | None = None,
    ) -> Store:
        store = await self._store_repo.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)

        AccessPolicy.enforce(
            self._current_user,
            Action.UPDATE_STORE,
            Resource(owner_id=store.owner_id),
        )

        validator = InputValidator()
        if name is not None:
            validator.check_name(name)
        if email is not None:
            validator.check_email(email)
        validator.check_address(address)
        validator.raise_if_invalid()

        if not store.update_details(name=name, email=email, address=address):
            msg = "No fields to update"
            raise ValidationError(msg)

        await self._store_repo.save(store)
        logger.info("Store updated: %s", store.id)
        return store
