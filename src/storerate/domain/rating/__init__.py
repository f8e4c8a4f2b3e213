"""Rating domain: one score per (user, store)."""

from storerate.domain.rating.aggregates import Rating
from storerate.domain.rating.exceptions import InvalidScoreError, RatingNotFoundError
from storerate.domain.rating.repositories import RatingRepository
from storerate.domain.rating.value_objects import (
    MAX_SCORE,
    MIN_SCORE,
    Score,
    SubmissionOutcome,
)

__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "InvalidScoreError",
    "Rating",
    "RatingNotFoundError",
    "RatingRepository",
    "Score",
    "SubmissionOutcome",
]
