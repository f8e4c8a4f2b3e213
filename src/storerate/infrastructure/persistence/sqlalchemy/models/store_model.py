"""SQLAlchemy model for stores."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from storerate.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class StoreModel(Base, TimestampMixin):
    """Database model for stores."""

    __tablename__ = "stores"

    # A user owns at most one store; NULL owners never collide
    __table_args__ = (UniqueConstraint("owner_id", name="uq_stores_owner_id"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(400), nullable=True)

    # Optional owner; removing the user removes their store
    owner_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<StoreModel(id={self.id}, name={self.name!r}, active={self.active})>"
