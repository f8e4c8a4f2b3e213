"""Score value object."""

from dataclasses import dataclass

from storerate.domain.rating.exceptions import InvalidScoreError

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass(frozen=True)
class Score:
    """An integer rating between 1 and 5 inclusive."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid score
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidScoreError(self.value)
        if not (MIN_SCORE <= self.value <= MAX_SCORE):
            raise InvalidScoreError(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
