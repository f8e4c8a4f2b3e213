"""SQLAlchemy implementation of RatingAggregatesPort.

All figures are computed with SQL aggregates on every call; there is no
cached or denormalized average to keep in sync.
"""

from __future__ import annotations

from typing import Iterable
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.application.dtos import ScoreCount
from storerate.application.ports import RatingAggregatesPort
from storerate.infrastructure.persistence.sqlalchemy.models import (
    RatingModel,
    StoreModel,
)


def _as_float(value: object) -> float | None:
    return None if value is None else float(value)


class RatingAggregatesSQLAlchemy(RatingAggregatesPort):
    """Averages, counts and distributions straight from the ratings table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def average_rating(self, store_id: UUID) -> float | None:
        stmt = select(func.avg(RatingModel.score)).where(
            RatingModel.store_id == store_id,
        )
        result = await self._session.execute(stmt)
        return _as_float(result.scalar_one())

    async def rating_count(self, store_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(RatingModel)
            .where(RatingModel.store_id == store_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def rating_distribution(self, store_id: UUID) -> list[ScoreCount]:
        stmt = (
            select(RatingModel.score, func.count())
            .where(RatingModel.store_id == store_id)
            .group_by(RatingModel.score)
            .order_by(RatingModel.score.desc())
        )
        result = await self._session.execute(stmt)
        return [ScoreCount(score=score, count=count) for score, count in result.all()]

    async def averages_for_stores(
        self,
        store_ids: Iterable[UUID],
    ) -> dict[UUID, float | None]:
        ids = list(store_ids)
        if not ids:
            return {}

        stmt = (
            select(RatingModel.store_id, func.avg(RatingModel.score))
            .where(RatingModel.store_id.in_(ids))
            .group_by(RatingModel.store_id)
        )
        result = await self._session.execute(stmt)
        averages: dict[UUID, float | None] = dict.fromkeys(ids)
        for store_id, avg in result.all():
            averages[store_id] = _as_float(avg)
        return averages

    async def averages_for_owners(
        self,
        owner_ids: Iterable[UUID],
    ) -> dict[UUID, float | None]:
        ids = list(owner_ids)
        if not ids:
            return {}

        stmt = (
            select(StoreModel.owner_id, func.avg(RatingModel.score))
            .join(RatingModel, RatingModel.store_id == StoreModel.id)
            .where(StoreModel.owner_id.in_(ids), StoreModel.active.is_(True))
            .group_by(StoreModel.owner_id)
        )
        result = await self._session.execute(stmt)
        averages: dict[UUID, float | None] = dict.fromkeys(ids)
        for owner_id, avg in result.all():
            averages[owner_id] = _as_float(avg)
        return averages
