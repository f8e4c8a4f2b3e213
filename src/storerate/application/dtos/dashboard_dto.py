"""Dashboard read models."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class ScoreCount:
    """Number of ratings with a given score."""

    score: int
    count: int


@dataclass(frozen=True)
class DashboardStatsDTO:
    """Platform-wide totals for administrators."""

    total_users: int
    total_stores: int
    total_ratings: int


@dataclass(frozen=True)
class StoreOwnerStatsDTO:
    """Aggregates for a store owner's own store."""

    store_id: UUID
    store_name: str
    total_ratings: int
    average_rating: float | None
    distribution: list[ScoreCount] = field(default_factory=list)
