"""Side effects of changing a user's role.

Becoming a store owner provisions a store; leaving the store_owner role
deactivates it (the store and its ratings are kept). Every other change
has no side effect.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from storerate.domain.store import Store
from storerate_identity.domain.user import UserRole

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.domain.store import StoreRepository
    from storerate_identity.domain.user import User

logger = logging.getLogger(__name__)


class RoleTransitionEffect(str, Enum):
    NONE = "none"
    PROVISION_STORE = "provision_store"
    DEACTIVATE_STORE = "deactivate_store"


ROLE_TRANSITIONS: dict[tuple[UserRole, UserRole], RoleTransitionEffect] = {
    (UserRole.USER, UserRole.STORE_OWNER): RoleTransitionEffect.PROVISION_STORE,
    (UserRole.STORE_OWNER, UserRole.USER): RoleTransitionEffect.DEACTIVATE_STORE,
    (UserRole.STORE_OWNER, UserRole.ADMIN): RoleTransitionEffect.DEACTIVATE_STORE,
    (UserRole.ADMIN, UserRole.USER): RoleTransitionEffect.NONE,
    (UserRole.ADMIN, UserRole.STORE_OWNER): RoleTransitionEffect.NONE,
    (UserRole.USER, UserRole.ADMIN): RoleTransitionEffect.NONE,
}


def transition_effect(old: UserRole, new: UserRole) -> RoleTransitionEffect:
    if old == new:
        return RoleTransitionEffect.NONE
    return ROLE_TRANSITIONS[(old, new)]


class RoleTransitionService:
    """Applies the store side effects of a role change.

    Runs inside the caller's unit of work; committing is left to the
    presentation layer so the role change and its effect land together.
    """

    def __init__(self, store_repository: StoreRepository):
        self._store_repo = store_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RoleTransitionService:
        return cls(store_repository=factory.store_repository())

    async def apply(self, user: User, previous_role: UserRole) -> Store | None:
        """Run the effect for ``previous_role -> user.role``.

        Returns
        -------
        The provisioned or deactivated store, if any
        """
        effect = transition_effect(previous_role, user.role)

        if effect == RoleTransitionEffect.NONE:
            return None

        logger.info(
            "Role transition for user %s: %s -> %s (%s)",
            user.id,
            previous_role.value,
            user.role.value,
            effect.value,
        )

        if effect == RoleTransitionEffect.PROVISION_STORE:
            return await self.provision_store(user)
        return await self.deactivate_store(user)

    async def provision_store(self, user: User) -> Store:
        """Give ``user`` an active store, reactivating a previous one if present."""
        existing = await self._store_repo.find_by_owner(user.id)
        if existing is not None:
            existing.activate()
            await self._store_repo.save(existing)
            logger.info("Reactivated store %s for owner %s", existing.id, user.id)
            return existing

        store = Store.create(
            name=user.name,
            email=user.email,
            address=user.address,
            owner_id=user.id,
        )
        await self._store_repo.save(store)
        logger.info("Provisioned store %s for owner %s", store.id, user.id)
        return store

    async def deactivate_store(self, user: User) -> Store | None:
        store = await self._store_repo.find_active_by_owner(user.id)
        if store is None:
            return None
        store.deactivate()
        await self._store_repo.save(store)
        logger.info("Deactivated store %s of former owner %s", store.id, user.id)
        return store
