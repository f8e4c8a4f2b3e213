from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.domain.rating import RatingNotFoundError
from storerate_identity.domain.access import AccessPolicy, Action, Resource

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.domain.rating import RatingRepository
    from storerate_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class DeleteRatingCommand:
    """Delete a rating; only its author or an admin may do so."""

    def __init__(
        self,
        rating_repository: RatingRepository,
        current_user: UserContext | None,
    ):
        self._rating_repo = rating_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteRatingCommand:
        return cls(
            rating_repository=factory.rating_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, rating_id: UUID) -> None:
        rating = await self._rating_repo.find_by_id(rating_id)
        if rating is None:
            raise RatingNotFoundError(rating_id)

        AccessPolicy.enforce(
            self._current_user,
            Action.DELETE_RATING,
            Resource(author_id=rating.user_id),
        )

        await self._rating_repo.delete(rating.id)
        logger.info("Rating deleted: %s", rating.id)
