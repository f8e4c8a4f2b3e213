"""SQLAlchemy implementation of RatingReadPort."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.application.dtos import RatingDetailsDTO
from storerate.application.ports import RatingReadPort
from storerate.domain.shared.time import ensure_tz_aware
from storerate.infrastructure.persistence.sqlalchemy.models import (
    RatingModel,
    StoreModel,
)
from storerate_identity.infrastructure.persistence.sqlalchemy.models import UserModel


class RatingReadAdapterSQLAlchemy(RatingReadPort):
    """Ratings joined with their author and store in one query."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_ratings(
        self,
        *,
        user_id: UUID | None = None,
        store_id: UUID | None = None,
        limit: int | None = None,
    ) -> list[RatingDetailsDTO]:
        stmt = (
            select(
                RatingModel,
                UserModel.name,
                UserModel.email,
                StoreModel.name,
                StoreModel.address,
            )
            .join(UserModel, UserModel.id == RatingModel.user_id)
            .join(StoreModel, StoreModel.id == RatingModel.store_id)
            .order_by(RatingModel.created_at.desc(), RatingModel.id)
        )
        if user_id is not None:
            stmt = stmt.where(RatingModel.user_id == user_id)
        if store_id is not None:
            stmt = stmt.where(RatingModel.store_id == store_id)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [
            RatingDetailsDTO(
                id=rating.id,
                user_id=rating.user_id,
                store_id=rating.store_id,
                score=rating.score,
                user_name=user_name,
                user_email=user_email,
                store_name=store_name,
                store_address=store_address,
                created_at=ensure_tz_aware(rating.created_at),
                updated_at=ensure_tz_aware(rating.updated_at),
            )
            for rating, user_name, user_email, store_name, store_address in result.all()
        ]
