"""SQLAlchemy implementation of RatingRepository.

``upsert`` is a create-or-update that never checks-then-writes in
application code. It leans on the ``uq_ratings_user_store`` constraint:

1. ``INSERT ... ON CONFLICT (user_id, store_id) DO NOTHING RETURNING id``.
   A returned id means this call created the row.
2. Otherwise ``UPDATE ... WHERE user_id = ? AND store_id = ? RETURNING id``
   overwrites the existing row.
3. If the update matched nothing, the competing row was deleted between
   the two statements and the insert is tried again (bounded).
"""

import logging
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.domain.rating import (
    Rating,
    RatingRepository,
    Score,
    SubmissionOutcome,
)
from storerate.domain.shared.exceptions import ConcurrencyError
from storerate.domain.shared.time import ensure_tz_aware, utc_now
from storerate.domain.store import StoreNotFoundError
from storerate.infrastructure.persistence.sqlalchemy.models import (
    RatingModel,
    StoreModel,
)

logger = logging.getLogger(__name__)

_ON_CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class RatingRepositorySQLAlchemy(RatingRepository):
    """SQLAlchemy implementation of the RatingRepository interface."""

    MAX_UPSERT_ATTEMPTS = 3

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, rating_id: UUID) -> Rating | None:
        stmt = select(RatingModel).where(RatingModel.id == rating_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_user_and_store(
        self,
        user_id: UUID,
        store_id: UUID,
    ) -> Rating | None:
        stmt = select(RatingModel).where(
            RatingModel.user_id == user_id,
            RatingModel.store_id == store_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def upsert(
        self,
        user_id: UUID,
        store_id: UUID,
        score: Score,
    ) -> tuple[Rating, SubmissionOutcome]:
        for attempt in range(1, self.MAX_UPSERT_ATTEMPTS + 1):
            rating_id = await self._insert_if_absent(user_id, store_id, score.value)
            if rating_id is not None:
                return await self._reload(rating_id), SubmissionOutcome.CREATED

            rating_id = await self._update_existing(user_id, store_id, score.value)
            if rating_id is not None:
                return await self._reload(rating_id), SubmissionOutcome.UPDATED

            logger.debug(
                "Rating for user=%s store=%s vanished mid-upsert (attempt %d)",
                user_id,
                store_id,
                attempt,
            )

        if not await self._store_exists(store_id):
            raise StoreNotFoundError(store_id)
        raise ConcurrencyError(
            details={"user_id": str(user_id), "store_id": str(store_id)},
        )

    async def delete(self, rating_id: UUID) -> None:
        await self._session.execute(
            delete(RatingModel).where(RatingModel.id == rating_id),
        )
        await self._session.flush()

    async def delete_by_user(self, user_id: UUID) -> int:
        result = await self._session.execute(
            delete(RatingModel).where(RatingModel.user_id == user_id),
        )
        await self._session.flush()
        return result.rowcount or 0

    async def delete_by_store(self, store_id: UUID) -> int:
        result = await self._session.execute(
            delete(RatingModel).where(RatingModel.store_id == store_id),
        )
        await self._session.flush()
        return result.rowcount or 0

    async def count(self) -> int:
        stmt = select(func.count()).select_from(RatingModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _insert_if_absent(
        self,
        user_id: UUID,
        store_id: UUID,
        score: int,
    ) -> UUID | None:
        now = utc_now()
        values: dict[str, Any] = {
            "id": uuid4(),
            "user_id": user_id,
            "store_id": store_id,
            "score": score,
            "created_at": now,
            "updated_at": now,
        }

        dialect_insert = _ON_CONFLICT_INSERTS[self._session.get_bind().dialect.name]
        stmt = (
            dialect_insert(RatingModel)
            .values(**values)
            .on_conflict_do_nothing(index_elements=["user_id", "store_id"])
            .returning(RatingModel.id)
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as e:
            # The unique conflict is absorbed, so this is the store FK
            raise StoreNotFoundError(store_id) from e
        return result.scalar_one_or_none()

    async def _update_existing(
        self,
        user_id: UUID,
        store_id: UUID,
        score: int,
    ) -> UUID | None:
        stmt = (
            update(RatingModel)
            .where(
                RatingModel.user_id == user_id,
                RatingModel.store_id == store_id,
            )
            .values(score=score, updated_at=utc_now())
            .returning(RatingModel.id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _reload(self, rating_id: UUID) -> Rating:
        stmt = (
            select(RatingModel)
            .where(RatingModel.id == rating_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return self._map_to_domain(result.scalar_one())

    async def _store_exists(self, store_id: UUID) -> bool:
        stmt = select(StoreModel.id).where(StoreModel.id == store_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    def _map_to_domain(self, model: RatingModel) -> Rating:
        return Rating.reconstitute(
            id=model.id,
            user_id=model.user_id,
            store_id=model.store_id,
            score=model.score,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
