"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from storerate.application.ports import RatingAggregatesPort, RatingReadPort
from storerate.domain.rating import RatingRepository
from storerate.domain.store import StoreRepository
from storerate_identity.domain.user.repositories import UserRepository

if TYPE_CHECKING:
    from storerate_identity.application.context import UserContext
    from storerate_identity.services import PasswordHashingService


class RepositoryFactory(Protocol):
    """Protocol for creating request-scoped repositories."""

    @property
    def current_user(self) -> UserContext | None:
        """The verified caller, or None for anonymous requests."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def store_repository(self) -> StoreRepository:
        """Get store repository."""
        ...

    def rating_repository(self) -> RatingRepository:
        """Get rating repository."""
        ...

    def rating_aggregates(self) -> RatingAggregatesPort:
        """Get rating aggregates port."""
        ...

    def rating_read_port(self) -> RatingReadPort:
        """Get rating listing port."""
        ...

    def password_service(self) -> PasswordHashingService:
        """Get the password hashing service."""
        ...
