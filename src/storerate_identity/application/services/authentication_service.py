"""Authentication service for registration, login and token checks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.domain.shared.validation import InputValidator
from storerate_identity.application.context import UserContext
from storerate_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRole,
    validate_new_user,
)
from storerate_identity.domain.user.validation import password_problems
from storerate_identity.exceptions import (
    IncorrectPasswordError,
    InvalidCredentialsError,
    InvalidTokenError,
)

if TYPE_CHECKING:
    from storerate_identity.domain.user import UserRepository
    from storerate_identity.schemas import TokenPayload
    from storerate_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates password hashing and JWT signing with the User
    repository to provide:
    - Self-registration of normal users
    - Login with email and password
    - Token verification (including reloading the account)
    - Password change
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def create_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
        )

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        address: str | None = None,
    ) -> User:
        validate_new_user(name, email, password, address).raise_if_invalid()

        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.strip().lower())

        password_hash = self._password_service.hash(password)
        user = User.create(name=name, email=email, address=address, role=UserRole.USER)
        await self._user_repo.save(user, password_hash=password_hash)

        logger.info("User registered: %s", user.email)
        return user

    async def authenticate(self, email: str, password: str) -> tuple[User, str]:
        validator = InputValidator()
        validator.check_email(email)
        if not password:
            validator.add("password", "Password is required")
        validator.raise_if_invalid()

        user = await self._user_repo.find_by_email(email)
        password_hash = (
            await self._user_repo.get_password_hash(user.id) if user else None
        )

        # Always runs bcrypt, even for unknown emails
        if not self._password_service.verify(password, password_hash) or user is None:
            logger.warning("Failed login attempt for %s", email)
            raise InvalidCredentialsError

        logger.info("User logged in: %s", user.email)
        return user, self.create_token(user)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)

    async def resolve_identity(self, token: str) -> UserContext:
        """Verify ``token`` and load the caller's current account.

        Role and profile come from the database, not the token, so a
        role change or account deletion takes effect immediately.
        """
        payload = self.verify_token(token)
        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            msg = "User no longer exists"
            raise InvalidTokenError(msg)
        return UserContext.create(user)

    async def get_current_user(self, identity: UserContext) -> User:
        user = await self._user_repo.find_by_id(identity.user_id)
        if user is None:
            raise UserNotFoundError(identity.user_id)
        return user

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        validator = InputValidator()
        if not current_password:
            validator.add("currentPassword", "Current password is required")
        validator.extend("newPassword", password_problems(new_password))
        validator.raise_if_invalid()

        password_hash = await self._user_repo.get_password_hash(user_id)
        if not self._password_service.verify(current_password, password_hash):
            raise IncorrectPasswordError

        new_hash = self._password_service.hash(new_password)
        await self._user_repo.set_password_hash(user_id, new_hash)

        logger.info("Password changed for user: %s", user_id)
