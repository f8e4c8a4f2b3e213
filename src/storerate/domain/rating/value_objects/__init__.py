from storerate.domain.rating.value_objects.score import MAX_SCORE, MIN_SCORE, Score
from storerate.domain.rating.value_objects.submission_outcome import (
    SubmissionOutcome,
)

__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "Score",
    "SubmissionOutcome",
]
