"""Rating aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from storerate.domain.rating.value_objects import Score
from storerate.domain.shared.time import utc_now


class Rating:
    """One user's score for one store.

    There is at most one Rating per (user_id, store_id); submitting
    again changes ``score`` in place.
    """

    def __init__(
        self,
        user_id: UUID,
        store_id: UUID,
        score: Union[int, Score],
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._store_id = store_id
        self._score = score if isinstance(score, Score) else Score(score)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def store_id(self) -> UUID:
        return self._store_id

    @property
    def score(self) -> int:
        return self._score.value

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        user_id: UUID,
        store_id: UUID,
        score: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Rating":
        return cls(
            id=id,
            user_id=user_id,
            store_id=store_id,
            score=score,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rating):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Rating(id={self._id}, user_id={self._user_id}, "
            f"store_id={self._store_id}, score={self.score})"
        )
