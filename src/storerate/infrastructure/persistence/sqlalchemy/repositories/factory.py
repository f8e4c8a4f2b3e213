"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from storerate.infrastructure.persistence.sqlalchemy.adapters import (
    RatingAggregatesSQLAlchemy,
    RatingReadAdapterSQLAlchemy,
)
from storerate.infrastructure.persistence.sqlalchemy.repositories.rating_repository import (  # NOQA: E501
    RatingRepositorySQLAlchemy,
)
from storerate.infrastructure.persistence.sqlalchemy.repositories.store_repository import (  # NOQA: E501
    StoreRepositorySQLAlchemy,
)
from storerate_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from storerate_identity.services import PasswordHashingService

if TYPE_CHECKING:
    from storerate_identity.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(
        self,
        session: AsyncSession,
        current_user: UserContext | None,
        password_service: PasswordHashingService | None = None,
    ):
        self._session = session
        self._current_user = current_user
        self._password_service = password_service

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._store_repo: StoreRepositorySQLAlchemy | None = None
        self._rating_repo: RatingRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> UserContext | None:
        return self._current_user

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def store_repository(self) -> StoreRepositorySQLAlchemy:
        if self._store_repo is None:
            self._store_repo = StoreRepositorySQLAlchemy(self._session)
        return self._store_repo

    def rating_repository(self) -> RatingRepositorySQLAlchemy:
        if self._rating_repo is None:
            self._rating_repo = RatingRepositorySQLAlchemy(self._session)
        return self._rating_repo

    def rating_aggregates(self) -> RatingAggregatesSQLAlchemy:
        return RatingAggregatesSQLAlchemy(self._session)

    def rating_read_port(self) -> RatingReadAdapterSQLAlchemy:
        return RatingReadAdapterSQLAlchemy(self._session)

    def password_service(self) -> PasswordHashingService:
        if self._password_service is None:
            self._password_service = PasswordHashingService()
        return self._password_service
