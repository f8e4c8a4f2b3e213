"""Access policy evaluated for every operation.

Each operation names an ``Action``; ``AccessPolicy.authorize`` turns the
caller's identity plus the target resource into a ``Decision``. Decisions
may carry a ``QueryScope`` that read queries apply to their SQL so a
caller never sees rows outside their own scope.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable
from uuid import UUID

from storerate.domain.shared.exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
)
from storerate_identity.domain.user.value_objects import UserRole

if TYPE_CHECKING:
    from storerate_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Every operation subject to authorization."""

    CREATE_STORE = "create_store"
    UPDATE_STORE = "update_store"
    DELETE_STORE = "delete_store"
    LIST_STORES = "list_stores"
    READ_STORE = "read_store"
    VIEW_OWN_STORE = "view_own_store"
    VIEW_OWN_STORE_RATINGS = "view_own_store_ratings"
    VIEW_OWN_STORE_STATS = "view_own_store_stats"

    CREATE_USER = "create_user"
    READ_USER = "read_user"
    UPDATE_USER = "update_user"
    UPDATE_USER_ROLE = "update_user_role"
    DELETE_USER = "delete_user"
    LIST_USERS = "list_users"
    CHANGE_PASSWORD = "change_password"

    SUBMIT_RATING = "submit_rating"
    DELETE_RATING = "delete_rating"
    LIST_ALL_RATINGS = "list_all_ratings"
    LIST_OWN_RATINGS = "list_own_ratings"
    VIEW_STORE_RATINGS = "view_store_ratings"

    VIEW_DASHBOARD = "view_dashboard"


@dataclass(frozen=True)
class QueryScope:
    """Row restriction derived from the caller's identity."""

    owner_id: UUID | None = None
    user_id: UUID | None = None


@dataclass(frozen=True)
class Resource:
    """The ownership facts of the target an action is applied to.

    Attributes
    ----------
    user_id
        Target user account (READ_USER, UPDATE_USER)
    owner_id
        Owner of the target store (UPDATE_STORE, VIEW_STORE_RATINGS)
    author_id
        Author of the target rating (DELETE_RATING)
    """

    user_id: UUID | None = None
    owner_id: UUID | None = None
    author_id: UUID | None = None


@dataclass(frozen=True)
class Decision:
    """Outcome of an access-policy evaluation."""

    allowed: bool
    reason: str | None = None
    scope: QueryScope | None = None

    @classmethod
    def allow(cls, scope: QueryScope | None = None) -> Decision:
        return cls(allowed=True, scope=scope)

    @classmethod
    def deny(cls, reason: str) -> Decision:
        return cls(allowed=False, reason=reason)


_EMPTY = Resource()

Rule = Callable[["UserContext", Resource], Decision]


def _admin_only(identity: UserContext, resource: Resource) -> Decision:
    if identity.role == UserRole.ADMIN:
        return Decision.allow()
    return Decision.deny("Administrator role required")


def _self_or_admin(identity: UserContext, resource: Resource) -> Decision:
    if identity.role == UserRole.ADMIN or resource.user_id == identity.user_id:
        return Decision.allow()
    return Decision.deny("Not authorized to access this user")


def _store_owner_scoped(identity: UserContext, resource: Resource) -> Decision:
    if identity.role == UserRole.STORE_OWNER:
        return Decision.allow(QueryScope(owner_id=identity.user_id))
    return Decision.deny("Store owner role required")


def _rating_user_only(identity: UserContext, resource: Resource) -> Decision:
    if identity.role == UserRole.USER:
        return Decision.allow(QueryScope(user_id=identity.user_id))
    return Decision.deny("Only normal users can submit ratings")


def _author_or_admin(identity: UserContext, resource: Resource) -> Decision:
    if identity.role == UserRole.ADMIN or resource.author_id == identity.user_id:
        return Decision.allow()
    return Decision.deny("Not authorized to delete this rating")


def _admin_or_store_owner(identity: UserContext, resource: Resource) -> Decision:
    if identity.role == UserRole.ADMIN:
        return Decision.allow()
    if (
        identity.role == UserRole.STORE_OWNER
        and resource.owner_id is not None
        and resource.owner_id == identity.user_id
    ):
        return Decision.allow()
    return Decision.deny("Not authorized to update this store")


def _store_ratings(identity: UserContext, resource: Resource) -> Decision:
    if identity.role != UserRole.STORE_OWNER:
        return Decision.allow()
    if resource.owner_id == identity.user_id:
        return Decision.allow(QueryScope(owner_id=identity.user_id))
    return Decision.deny("Store owners can only view ratings of their own store")


def _own_rows(identity: UserContext, resource: Resource) -> Decision:
    return Decision.allow(QueryScope(user_id=identity.user_id))


def _authenticated(identity: UserContext, resource: Resource) -> Decision:
    return Decision.allow()


class AccessPolicy:
    """Maps each ``Action`` to a rule over (identity, resource)."""

    RULES: dict[Action, Rule] = {
        Action.CREATE_STORE: _admin_only,
        Action.DELETE_STORE: _admin_only,
        Action.CREATE_USER: _admin_only,
        Action.DELETE_USER: _admin_only,
        Action.LIST_USERS: _admin_only,
        Action.VIEW_DASHBOARD: _admin_only,
        Action.LIST_ALL_RATINGS: _admin_only,
        Action.UPDATE_USER_ROLE: _admin_only,
        Action.READ_USER: _self_or_admin,
        Action.UPDATE_USER: _self_or_admin,
        Action.VIEW_OWN_STORE: _store_owner_scoped,
        Action.VIEW_OWN_STORE_RATINGS: _store_owner_scoped,
        Action.VIEW_OWN_STORE_STATS: _store_owner_scoped,
        Action.SUBMIT_RATING: _rating_user_only,
        Action.DELETE_RATING: _author_or_admin,
        Action.UPDATE_STORE: _admin_or_store_owner,
        Action.VIEW_STORE_RATINGS: _store_ratings,
        Action.LIST_OWN_RATINGS: _own_rows,
        Action.LIST_STORES: _authenticated,
        Action.READ_STORE: _authenticated,
        Action.CHANGE_PASSWORD: _authenticated,
    }

    @classmethod
    def authorize(
        cls,
        identity: UserContext | None,
        action: Action,
        resource: Resource | None = None,
    ) -> Decision:
        """Evaluate ``action`` for ``identity``; never raises."""
        if identity is None:
            return Decision.deny("Authentication required")
        rule = cls.RULES[action]
        return rule(identity, resource or _EMPTY)

    @classmethod
    def enforce(
        cls,
        identity: UserContext | None,
        action: Action,
        resource: Resource | None = None,
    ) -> Decision:
        """Like ``authorize`` but raises instead of returning a denial.

        Raises
        ------
        AuthenticationRequiredError
            If there is no verified identity
        AccessDeniedError
            If the identity is not allowed to perform ``action``
        """
        if identity is None:
            raise AuthenticationRequiredError()

        decision = cls.authorize(identity, action, resource)
        if not decision.allowed:
            logger.warning(
                "Access denied: user=%s role=%s action=%s reason=%s",
                identity.user_id,
                identity.role.value,
                action.value,
                decision.reason,
            )
            raise AccessDeniedError(decision.reason or AccessDeniedError().message)
        return decision
