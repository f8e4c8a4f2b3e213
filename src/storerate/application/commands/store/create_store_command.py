from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.domain.shared.validation import InputValidator
from storerate.domain.store import Store, StoreAlreadyOwnedError
from storerate_identity.domain.access import AccessPolicy, Action
from storerate_identity.domain.user import (
    CannotDemoteSelfError,
    UserNotFoundError,
    UserRole,
)

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext
    from storerate_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class CreateStoreCommand:
    """Create a store, optionally assigning (and promoting) its owner."""

    def __init__(
        self,
        store_repository: StoreRepository,
        user_repository: UserRepository,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._user_repo = user_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateStoreCommand:
        return cls(
            store_repository=factory.store_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        name: str,
        email: str,
        address: str | None = None,
        owner_id: UUID | None = None,
    ) -> Store:
        AccessPolicy.enforce(self._current_user, Action.CREATE_STORE)

        validator = InputValidator()
        validator.check_name(name)
        validator.check_email(email)
        validator.check_address(address)
        validator.raise_if_invalid()

        if owner_id is not None:
            await self._prepare_owner(owner_id)

        store = Store.create(name=name, email=email, address=address, owner_id=owner_id)
        await self._store_repo.save(store)

        logger.info("Store created: %s (%s)", store.id, store.name)
        return store

    async def _prepare_owner(self, owner_id: UUID) -> None:
        owner = await self._user_repo.find_by_id(owner_id)
        if owner is None:
            raise UserNotFoundError(owner_id)

        if await self._store_repo.find_by_owner(owner_id) is not None:
            raise StoreAlreadyOwnedError(owner_id)

        if owner.role != UserRole.STORE_OWNER:
            if owner.id == self._current_user.user_id:
                raise CannotDemoteSelfError
            previous = owner.change_role(UserRole.STORE_OWNER)
            await self._user_repo.save(owner)
            logger.info(
                "Promoted user %s from %s to store_owner",
                owner.id,
                previous.value,
            )
