"""SQLAlchemy model for ratings."""

from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from storerate.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class RatingModel(Base, TimestampMixin):
    """Database model for ratings.

    ``uq_ratings_user_store`` is what makes one-rating-per-(user, store)
    hold under concurrent submissions; the upsert in the repository
    relies on it as its conflict target.
    """

    __tablename__ = "ratings"

    __table_args__ = (
        UniqueConstraint("user_id", "store_id", name="uq_ratings_user_store"),
        CheckConstraint("score >= 1 AND score <= 5", name="ck_ratings_score_range"),
        Index("ix_ratings_store_id", "store_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    store_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False,
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<RatingModel(id={self.id}, user_id={self.user_id}, "
            f"store_id={self.store_id}, score={self.score})>"
        )
