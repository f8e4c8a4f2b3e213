"""Read-side adapters (aggregates and listings computed in SQL)."""

from storerate.infrastructure.persistence.sqlalchemy.adapters.rating_aggregates_adapter import (  # NOQA: E501
    RatingAggregatesSQLAlchemy,
)
from storerate.infrastructure.persistence.sqlalchemy.adapters.rating_read_adapter import (  # NOQA: E501
    RatingReadAdapterSQLAlchemy,
)

__all__ = ["RatingAggregatesSQLAlchemy", "RatingReadAdapterSQLAlchemy"]
