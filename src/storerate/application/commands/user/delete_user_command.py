from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate_identity.domain.access import AccessPolicy, Action
from storerate_identity.domain.user import CannotDeleteSelfError, UserNotFoundError

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.domain.rating import RatingRepository
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext
    from storerate_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Delete a user together with everything hanging off them.

    Removes the ratings they authored and every store they own (active or
    deactivated) with that store's ratings. All deletes share one unit of
    work, so the cascade commits or rolls back as a whole.
    """

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
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: UUID) -> None:
        AccessPolicy.enforce(self._current_user, Action.DELETE_USER)

        if user_id == self._current_user.user_id:
            raise CannotDeleteSelfError

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        ratings_removed = await self._rating_repo.delete_by_user(user.id)
        stores_removed = await self._store_repo.delete_by_owner(user.id)
        await self._user_repo.delete(user.id)

        logger.info(
            "User deleted: %s (%d ratings, %d stores removed)",
            user.email,
            ratings_removed,
            stores_removed,
        )
