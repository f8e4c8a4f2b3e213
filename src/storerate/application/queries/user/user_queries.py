"""User queries.

Store owners are returned with ``rating``, the average score of their
active store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from storerate.application.dtos import UserDTO
from storerate_identity.domain.access import AccessPolicy, Action, Resource
from storerate_identity.domain.user import UserNotFoundError

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.application.ports import RatingAggregatesPort
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext
    from storerate_identity.domain.user import UserRepository


class GetUserQuery:
    """Get a user; callers may read themselves, admins anyone."""

    def __init__(
        self,
        user_repository: UserRepository,
        store_repository: StoreRepository,
        aggregates: RatingAggregatesPort,
        current_user: UserContext | None,
    ):
        self._user_repo = user_repository
        self._store_repo = store_repository
        self._aggregates = aggregates
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserQuery:
        return cls(
            user_repository=factory.user_repository(),
            store_repository=factory.store_repository(),
            aggregates=factory.rating_aggregates(),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: UUID) -> UserDTO:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        AccessPolicy.enforce(
            self._current_user,
            Action.READ_USER,
            Resource(user_id=user.id),
        )

        rating = None
        if user.is_store_owner:
            store = await self._store_repo.find_active_by_owner(user.id)
            if store is not None:
                rating = await self._aggregates.average_rating(store.id)
        return UserDTO.from_user(user, rating)


class ListUsersQuery:
    """List users, newest first (admin only)."""

    def __init__(
        self,
        user_repository: UserRepository,
        aggregates: RatingAggregatesPort,
        current_user: UserContext | None,
    ):
        self._user_repo = user_repository
        self._aggregates = aggregates
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(
            user_repository=factory.user_repository(),
            aggregates=factory.rating_aggregates(),
            current_user=factory.current_user,
        )

    async def execute(self, limit: int | None = None) -> list[UserDTO]:
        AccessPolicy.enforce(self._current_user, Action.LIST_USERS)

        users = await self._user_repo.list_all(limit=limit)
        owner_ids = [u.id for u in users if u.is_store_owner]
        averages = (
            await self._aggregates.averages_for_owners(owner_ids) if owner_ids else {}
        )
        return [UserDTO.from_user(u, averages.get(u.id)) for u in users]
