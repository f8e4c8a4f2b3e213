"""Store queries, each result carrying the store's computed average."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from storerate.application.dtos import StoreDTO
from storerate.domain.store import StoreNotFoundError
from storerate_identity.domain.access import AccessPolicy, Action

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.application.ports import RatingAggregatesPort
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext


class ListStoresQuery:
    """List stores by name.

    Administrators see every store; everyone else only sees active ones.
    """

    def __init__(
        self,
        store_repository: StoreRepository,
        aggregates: RatingAggregatesPort,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._aggregates = aggregates
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListStoresQuery:
        return cls(
            store_repository=factory.store_repository(),
            aggregates=factory.rating_aggregates(),
            current_user=factory.current_user,
        )

    async def execute(self, limit: int | None = None) -> list[StoreDTO]:
        AccessPolicy.enforce(self._current_user, Action.LIST_STORES)

        stores = await self._store_repo.list_all(
            limit=limit,
            include_inactive=self._current_user.is_admin,
        )
        averages = await self._aggregates.averages_for_stores(s.id for s in stores)
        return [StoreDTO.from_store(s, averages.get(s.id)) for s in stores]


class GetStoreQuery:
    """Get one store by id, deactivated or not."""

    def __init__(
        self,
        store_repository: StoreRepository,
        aggregates: RatingAggregatesPort,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._aggregates = aggregates
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetStoreQuery:
        return cls(
            store_repository=factory.store_repository(),
            aggregates=factory.rating_aggregates(),
            current_user=factory.current_user,
        )

    async def execute(self, store_id: UUID) -> StoreDTO:
        AccessPolicy.enforce(self._current_user, Action.READ_STORE)

        store = await self._store_repo.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)

        return StoreDTO.from_store(
            store,
            await self._aggregates.average_rating(store.id),
            await self._aggregates.rating_count(store.id),
        )


class GetOwnStoreQuery:
    """The calling store owner's store."""

    def __init__(
        self,
        store_repository: StoreRepository,
        aggregates: RatingAggregatesPort,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._aggregates = aggregates
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetOwnStoreQuery:
        return cls(
            store_repository=factory.store_repository(),
            aggregates=factory.rating_aggregates(),
            current_user=factory.current_user,
        )

    async def execute(self) -> StoreDTO:
        decision = AccessPolicy.enforce(self._current_user, Action.VIEW_OWN_STORE)
        owner_id = decision.scope.owner_id

        store = await self._store_repo.find_by_owner(owner_id)
        if store is None:
            raise StoreNotFoundError(owner_id=owner_id)

        return StoreDTO.from_store(
            store,
            await self._aggregates.average_rating(store.id),
            await self._aggregates.rating_count(store.id),
        )
