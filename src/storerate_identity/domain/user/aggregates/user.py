"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from storerate.domain.shared.time import utc_now
from storerate_identity.domain.user.value_objects import UserRole
from storerate_identity.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds profile and role. The password hash is deliberately not part of
    the aggregate; it lives behind dedicated repository methods.
    """

    def __init__(
        self,
        name: str,
        email: Union[str, Email],
        address: str | None = None,
        role: Union[str, UserRole] = UserRole.USER,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._name = name
        self._email = email if isinstance(email, Email) else Email(email)
        self._address = address
        self._id = id or uuid4()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
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
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def is_store_owner(self) -> bool:
        return self._role == UserRole.STORE_OWNER

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        name: str | None = None,
        email: Union[str, Email, None] = None,
        address: str | None = None,
    ) -> bool:
        """Apply the given profile fields; return whether anything was set."""
        changed = False
        if name is not None:
            self._name = name
            changed = True
        if email is not None:
            self._email = email if isinstance(email, Email) else Email(email)
            changed = True
        if address is not None:
            self._address = address
            changed = True
        if changed:
            self._updated_at = utc_now()
        return changed

    def change_role(self, role: UserRole) -> UserRole:
        """Set a new role and return the previous one."""
        previous = self._role
        if role != previous:
            self._role = role
            self._updated_at = utc_now()
        return previous

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        address: str | None = None,
        role: UserRole = UserRole.USER,
    ) -> "User":
        return cls(name=name, email=email, address=address, role=role)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        address: str | None,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            address=address,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, email={self._email.value}, "
            f"role={self._role.value})"
        )
