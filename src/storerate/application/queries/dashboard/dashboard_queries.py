"""Dashboard queries for administrators and store owners."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerate.application.dtos import DashboardStatsDTO, StoreOwnerStatsDTO
from storerate.domain.store import StoreNotFoundError
from storerate_identity.domain.access import AccessPolicy, Action

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.application.ports import RatingAggregatesPort
    from storerate.domain.rating import RatingRepository
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext
    from storerate_identity.domain.user import UserRepository


class DashboardStatsQuery:
    """Platform totals. Deactivated stores are counted."""

    def __init__(
        self,
        user_repository: UserRepository,
        store_repository: StoreRepository,
        rating_repository: RatingRepository,
        current_user: UserContext | None,
    ):
        self._user_repo = user_repository
        self._store_repo = store_repository
        self._rating_repo = rating_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DashboardStatsQuery:
        return cls(
            user_repository=factory.user_repository(),
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
            current_user=factory.current_user,
        )

    async def execute(self) -> DashboardStatsDTO:
        AccessPolicy.enforce(self._current_user, Action.VIEW_DASHBOARD)
        return DashboardStatsDTO(
            total_users=await self._user_repo.count(),
            total_stores=await self._store_repo.count(),
            total_ratings=await self._rating_repo.count(),
        )


class StoreOwnerStatsQuery:
    """Count, average and score distribution of the caller's own store."""

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
    def from_factory(cls, factory: RepositoryFactory) -> StoreOwnerStatsQuery:
        return cls(
            store_repository=factory.store_repository(),
            aggregates=factory.rating_aggregates(),
            current_user=factory.current_user,
        )

    async def execute(self) -> StoreOwnerStatsDTO:
        decision = AccessPolicy.enforce(
            self._current_user,
            Action.VIEW_OWN_STORE_STATS,
        )
        owner_id = decision.scope.owner_id

        store = await self._store_repo.find_by_owner(owner_id)
        if store is None:
            raise StoreNotFoundError(owner_id=owner_id)

        return StoreOwnerStatsDTO(
            store_id=store.id,
            store_name=store.name,
            total_ratings=await self._aggregates.rating_count(store.id),
            average_rating=await self._aggregates.average_rating(store.id),
            distribution=await self._aggregates.rating_distribution(store.id),
        )
