from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storerate.application.commands.user.role_input import parse_role
from storerate.application.services import RoleTransitionService
from storerate_identity.domain.access import AccessPolicy, Action
from storerate_identity.domain.user import (
    EmailAlreadyExistsError,
    InvalidRoleError,
    User,
    UserRole,
    validate_new_user,
)

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory
    from storerate_identity.application.context import UserContext
    from storerate_identity.domain.user import UserRepository
    from storerate_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command for an admin to create a user with any role.

    Creating a store owner provisions their store in the same unit of work.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        role_transitions: RoleTransitionService,
        current_user: UserContext | None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._role_transitions = role_transitions
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=factory.password_service(),
            role_transitions=RoleTransitionService.from_factory(factory),
            current_user=factory.current_user,
        )

    async def execute(  # NOQA: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        address: str | None = None,
        role: str | UserRole = UserRole.USER,
    ) -> User:
        AccessPolicy.enforce(self._current_user, Action.CREATE_USER)

        validator = validate_new_user(name, email, password, address)
        new_role = UserRole.USER
        try:
            new_role = parse_role(role)
        except InvalidRoleError as e:
            validator.add("role", e.errors[0].message)
        validator.raise_if_invalid()

        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.strip().lower())

        password_hash = self._password_service.hash(password)
        user = User.create(name=name, email=email, address=address, role=new_role)
        await self._user_repo.save(user, password_hash=password_hash)

        if new_role == UserRole.STORE_OWNER:
            await self._role_transitions.provision_store(user)

        logger.info("User created by admin: %s (role: %s)", user.email, new_role.value)
        return user
