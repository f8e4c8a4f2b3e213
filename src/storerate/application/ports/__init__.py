"""Read-side ports.

These ports are report-like and return application DTOs (read models),
not domain aggregates.
"""

from storerate.application.ports.rating_aggregates_port import RatingAggregatesPort
from storerate.application.ports.rating_read_port import RatingReadPort

__all__ = ["RatingAggregatesPort", "RatingReadPort"]
