"""Submit (create or update) the caller's rating of a store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.domain.rating import Rating, Score, SubmissionOutcome
from storerate.domain.store import StoreInactiveError, StoreNotFoundError
from storerate_identity.domain.access import AccessPolicy, Action

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate.domain.rating import RatingRepository
    from storerate.domain.store import StoreRepository
    from storerate_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class SubmitRatingCommand:
    """Record a score for a store, one rating per (user, store).

    Checks run in a fixed order: score range, caller role, store
    existence, store active. The write itself is a single atomic
    create-or-update in the rating repository.
    """

    def __init__(
        self,
        store_repository: StoreRepository,
        rating_repository: RatingRepository,
        current_user: UserContext | None,
    ):
        self._store_repo = store_repository
        self._rating_repo = rating_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SubmitRatingCommand:
        return cls(
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        store_id: UUID,
        score: int,
    ) -> tuple[Rating, SubmissionOutcome]:
        valid_score = Score(score)

        decision = AccessPolicy.enforce(self._current_user, Action.SUBMIT_RATING)
        user_id = decision.scope.user_id

        store = await self._store_repo.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)
        if not store.active:
            raise StoreInactiveError(store_id)

        rating, outcome = await self._rating_repo.upsert(user_id, store.id, valid_score)

        logger.info(
            "Rating %s: user=%s store=%s score=%d",
            outcome.value,
            user_id,
            store.id,
            rating.score,
        )
        return rating, outcome
