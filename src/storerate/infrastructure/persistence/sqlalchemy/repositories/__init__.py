"""SQLAlchemy repository implementations."""

from storerate.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from storerate.infrastructure.persistence.sqlalchemy.repositories.rating_repository import (  # NOQA: E501
    RatingRepositorySQLAlchemy,
)
from storerate.infrastructure.persistence.sqlalchemy.repositories.store_repository import (  # NOQA: E501
    StoreRepositorySQLAlchemy,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "RatingRepositorySQLAlchemy",
    "StoreRepositorySQLAlchemy",
]
