"""Store aggregate."""

from datetime import datetime
from uuid import UUID, uuid4

from storerate.domain.shared.time import utc_now


class Store:
    """A rateable store, optionally owned by a store_owner user.

    Deactivated stores keep their row and ratings; they stop accepting
    new ratings and drop out of non-admin listings.
    """

    def __init__(
        self,
        name: str,
        email: str,
        address: str | None = None,
        owner_id: UUID | None = None,
        active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = name
        self._email = email.strip().lower()
        self._address = address
        self._owner_id = owner_id
        self._active = active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def owner_id(self) -> UUID | None:
        return self._owner_id

    @property
    def active(self) -> bool:
        return self._active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._owner_id is not None and self._owner_id == user_id

    def update_details(
        self,
        name: str | None = None,
        email: str | None = None,
        address: str | None = None,
    ) -> bool:
        changed = False
        if name is not None:
            self._name = name
            changed = True
        if email is not None:
            self._email = email.strip().lower()
            changed = True
        if address is not None:
            self._address = address
            changed = True
        if changed:
            self._touch()
        return changed

    def activate(self) -> None:
        if not self._active:
            self._active = True
            self._touch()

    def deactivate(self) -> None:
        if self._active:
            self._active = False
            self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        address: str | None = None,
        owner_id: UUID | None = None,
    ) -> "Store":
        return cls(name=name, email=email, address=address, owner_id=owner_id)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        email: str,
        address: str | None,
        owner_id: UUID | None,
        active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Store":
        return cls(
            id=id,
            name=name,
            email=email,
            address=address,
            owner_id=owner_id,
            active=active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Store(id={self._id}, name={self._name!r}, active={self._active})"
