from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.application.commands.user.role_input import parse_role
from storerate.application.services import RoleTransitionService
from storerate.domain.shared.exceptions import ValidationError
from storerate.domain.shared.validation import InputValidator
from storerate_identity.domain.access import AccessPolicy, Action, Resource
from storerate_identity.domain.user import (
    CannotDemoteSelfError,
    Email,
    EmailAlreadyExistsError,
    InvalidRoleError,
    User,
    UserNotFoundError,
    UserRole,
)

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate_identity.application.context import UserContext
    from storerate_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Update a user's profile and, for admins, their role.

    A role sent by a non-admin is ignored rather than rejected. Role
    changes run through the RoleTransitionService after the profile
    fields are applied, so a provisioned store uses the updated details.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        role_transitions: RoleTransitionService,
        current_user: UserContext | None,
    ):
        self._user_repo = user_repository
        self._role_transitions = role_transitions
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            role_transitions=RoleTransitionService.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        user_id: UUID,
        name: str | None = None,
        email: str | None = None,
        address: str | None = None,
        role: str | UserRole | None = None,
    ) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        AccessPolicy.enforce(
            self._current_user,
            Action.UPDATE_USER,
            Resource(user_id=user.id),
        )

        if role is not None and not self._may_change_role():
            logger.debug("Ignoring role field from non-admin %s", self._current_user)
            role = None

        new_role = self._validate(name, email, address, role)

        if name is None and email is None and address is None and new_role is None:
            msg = "No fields to update"
            raise ValidationError(msg)

        if (
            new_role is not None
            and new_role != user.role
            and user.id == self._current_user.user_id
        ):
            raise CannotDemoteSelfError

        if email is not None:
            await self._ensure_email_available(user, email)

        user.update_profile(name=name, email=email, address=address)
        previous_role = user.role
        if new_role is not None:
            previous_role = user.change_role(new_role)

        await self._user_repo.save(user)
        await self._role_transitions.apply(user, previous_role)

        logger.info("User updated: %s", user.id)
        return user

    def _may_change_role(self) -> bool:
        decision = AccessPolicy.authorize(self._current_user, Action.UPDATE_USER_ROLE)
        return decision.allowed

    @staticmethod
    def _validate(
        name: str | None,
        email: str | None,
        address: str | None,
        role: str | UserRole | None,
    ) -> UserRole | None:
        validator = InputValidator()
        if name is not None:
            validator.check_name(name)
        if email is not None:
            validator.check_email(email)
        validator.check_address(address)

        new_role = None
        if role is not None:
            try:
                new_role = parse_role(role)
            except InvalidRoleError as e:
                validator.add("role", e.errors[0].message)

        validator.raise_if_invalid()
        return new_role

    async def _ensure_email_available(self, user: User, email: str) -> None:
        normalized = Email(email).value
        if normalized == user.email:
            return
        if await self._user_repo.exists_by_email(normalized):
            raise EmailAlreadyExistsError(normalized)
