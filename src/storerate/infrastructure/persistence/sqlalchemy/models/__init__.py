"""SQLAlchemy models for stores and ratings.

The ``users`` table is defined in storerate_identity on the same Base.
"""

from storerate.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from storerate.infrastructure.persistence.sqlalchemy.models.rating_model import (
    RatingModel,
)
from storerate.infrastructure.persistence.sqlalchemy.models.store_model import (
    StoreModel,
)

__all__ = [
    "Base",
    "RatingModel",
    "StoreModel",
    "TimestampMixin",
]
