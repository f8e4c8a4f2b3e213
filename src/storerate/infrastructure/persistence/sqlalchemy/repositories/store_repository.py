"""SQLAlchemy implementation of StoreRepository."""

import logging
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.domain.shared.time import ensure_tz_aware
from storerate.domain.store import Store, StoreAlreadyOwnedError, StoreRepository
from storerate.infrastructure.persistence.sqlalchemy.models import (
    RatingModel,
    StoreModel,
)

logger = logging.getLogger(__name__)


class StoreRepositorySQLAlchemy(StoreRepository):
    """SQLAlchemy implementation of the StoreRepository interface.

    Deletes remove dependent ratings explicitly in the same transaction,
    so the cascade holds even where the backend ignores ON DELETE.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, store_id: UUID) -> Store | None:
        model = await self._find_model_by_id(store_id)
        return self._map_to_domain(model) if model else None

    async def find_by_owner(self, owner_id: UUID) -> Store | None:
        stmt = select(StoreModel).where(StoreModel.owner_id == owner_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_active_by_owner(self, owner_id: UUID) -> Store | None:
        stmt = select(StoreModel).where(
            StoreModel.owner_id == owner_id,
            StoreModel.active.is_(True),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def save(self, store: Store) -> None:
        existing = await self._find_model_by_id(store.id)

        try:
            if existing:
                self._update_model(existing, store)
                logger.debug("Updated store: %s", store.id)
            else:
                self._session.add(self._map_to_model(store))
                logger.info(
                    "Created store: %s (owner: %s)",
                    store.id,
                    store.owner_id,
                )

            await self._session.flush()
        except IntegrityError as e:
            if "owner_id" in str(e):
                raise StoreAlreadyOwnedError(store.owner_id) from e
            raise

    async def delete(self, store_id: UUID) -> None:
        await self._session.execute(
            delete(RatingModel).where(RatingModel.store_id == store_id),
        )
        await self._session.execute(
            delete(StoreModel).where(StoreModel.id == store_id),
        )
        await self._session.flush()
        logger.info("Deleted store and its ratings: %s", store_id)

    async def delete_by_owner(self, owner_id: UUID) -> int:
        store_ids = select(StoreModel.id).where(StoreModel.owner_id == owner_id)
        await self._session.execute(
            delete(RatingModel).where(RatingModel.store_id.in_(store_ids)),
        )
        result = await self._session.execute(
            delete(StoreModel).where(StoreModel.owner_id == owner_id),
        )
        await self._session.flush()
        return result.rowcount or 0

    async def list_all(
        self,
        limit: int | None = None,
        include_inactive: bool = True,
    ) -> list[Store]:
        stmt = select(StoreModel).order_by(StoreModel.name, StoreModel.id)
        if not include_inactive:
            stmt = stmt.where(StoreModel.active.is_(True))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(StoreModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, store_id: UUID) -> StoreModel | None:
        stmt = select(StoreModel).where(StoreModel.id == store_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: StoreModel) -> Store:
        return Store.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            address=model.address,
            owner_id=model.owner_id,
            active=model.active,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, store: Store) -> StoreModel:
        return StoreModel(
            id=store.id,
            name=store.name,
            email=store.email,
            address=store.address,
            owner_id=store.owner_id,
            active=store.active,
            created_at=store.created_at,
            updated_at=store.updated_at,
        )

    def _update_model(self, model: StoreModel, store: Store) -> None:
        model.name = store.name
        model.email = store.email
        model.address = store.address
        model.owner_id = store.owner_id
        model.active = store.active
        model.updated_at = store.updated_at
