"""Rating listings, newest first."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from storerate.application.dtos import RatingDetailsDTO
from storerate.domain.store import StoreNotFoundError
from storerate_identity.domain.access import AccessPolicy, Action, Resource

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.application.ports import RatingReadPort
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext


class ListRatingsQuery:
    """Every rating on the platform (admin only)."""

    def __init__(self, read_port: RatingReadPort, current_user: UserContext | None):
        self._read_port = read_port
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListRatingsQuery:
        return cls(
            read_port=factory.rating_read_port(),
            current_user=factory.current_user,
        )

    async def execute(self, limit: int | None = None) -> list[RatingDetailsDTO]:
        AccessPolicy.enforce(self._current_user, Action.LIST_ALL_RATINGS)
        return await self._read_port.list_ratings(limit=limit)


class ListOwnRatingsQuery:
    """Ratings the caller authored."""

    def __init__(self, read_port: RatingReadPort, current_user: UserContext | None):
        self._read_port = read_port
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListOwnRatingsQuery:
        return cls(
            read_port=factory.rating_read_port(),
            current_user=factory.current_user,
        )

    async def execute(self) -> list[RatingDetailsDTO]:
        decision = AccessPolicy.enforce(self._current_user, Action.LIST_OWN_RATINGS)
        return await self._read_port.list_ratings(user_id=decision.scope.user_id)


class ListRatingsForStoreQuery:
    """Ratings of one store.

    Any authenticated caller may read them, except that a store owner
    may only read their own store's ratings.
    """

    def __init__(
        self,
        store_repository: StoreRepository,
        read_port: RatingReadPort,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._read_port = read_port
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListRatingsForStoreQuery:
        return cls(
            store_repository=factory.store_repository(),
            read_port=factory.rating_read_port(),
            current_user=factory.current_user,
        )

    async def execute(self, store_id: UUID) -> list[RatingDetailsDTO]:
        store = await self._store_repo.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)

        AccessPolicy.enforce(
            self._current_user,
            Action.VIEW_STORE_RATINGS,
            Resource(owner_id=store.owner_id),
        )
        return await self._read_port.list_ratings(store_id=store.id)


class ListOwnStoreRatingsQuery:
    """Ratings of the calling store owner's store."""

    def __init__(
        self,
        store_repository: StoreRepository,
        read_port: RatingReadPort,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._read_port = read_port
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListOwnStoreRatingsQuery:
        return cls(
            store_repository=factory.store_repository(),
            read_port=factory.rating_read_port(),
            current_user=factory.current_user,
        )

    async def execute(self) -> list[RatingDetailsDTO]:
        decision = AccessPolicy.enforce(
            self._current_user,
            Action.VIEW_OWN_STORE_RATINGS,
        )
        owner_id = decision.scope.owner_id

        store = await self._store_repo.find_by_owner(owner_id)
        if store is None:
            raise StoreNotFoundError(owner_id=owner_id)
        return await self._read_port.list_ratings(store_id=store.id)
