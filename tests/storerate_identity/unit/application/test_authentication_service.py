"""Unit tests for AuthenticationService."""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from storerate.domain.shared.exceptions import ValidationError
from storerate_identity.application.services import AuthenticationService
from storerate_identity.domain.user import EmailAlreadyExistsError, User, UserRole
from storerate_identity.exceptions import (
    IncorrectPasswordError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from storerate_identity.services import JWTService, PasswordHashingService

TEST_NAME = "Regular Test User Account"
TEST_EMAIL = "user@example.com"
TEST_PASSWORD = "Secret#123"


class TestAuthenticationService:
    """Tests with a mocked repository and real hashing/signing."""

    def setup_method(self):
        self.user_repo = AsyncMock()
        self.password_service = PasswordHashingService(rounds=4)
        self.jwt_service = JWTService(secret_key="unit-test-secret")

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    def _stored_user(self, role: UserRole = UserRole.USER) -> User:
        user = User.create(name=TEST_NAME, email=TEST_EMAIL, role=role)
        self.user_repo.find_by_email.return_value = user
        self.user_repo.find_by_id.return_value = user
        self.user_repo.get_password_hash.return_value = self.password_service.hash(
            TEST_PASSWORD,
        )
        return user

    # ------------------------------------------------------------------
    # register
    # ------------------------------------------------------------------

    async def test_register_creates_user_role(self):
        self.user_repo.exists_by_email.return_value = False

        user = await self.service.register(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        assert user.role == UserRole.USER
        self.user_repo.save.assert_awaited_once()
        saved_hash = self.user_repo.save.call_args.kwargs["password_hash"]
        assert self.password_service.verify(TEST_PASSWORD, saved_hash)

    async def test_register_duplicate_email(self):
        self.user_repo.exists_by_email.return_value = True

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.register(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        self.user_repo.save.assert_not_called()

    async def test_register_reports_all_field_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.register("short", "bad", "weak", None)

        fields = {e.field for e in exc_info.value.errors}
        assert fields == {"name", "email", "password"}
        self.user_repo.exists_by_email.assert_not_called()

    # ------------------------------------------------------------------
    # authenticate
    # ------------------------------------------------------------------

    async def test_authenticate_success_returns_token(self):
        user = self._stored_user()

        logged_in, token = await self.service.authenticate(TEST_EMAIL, TEST_PASSWORD)

        assert logged_in is user
        payload = self.jwt_service.verify_token(token)
        assert payload.user_id == user.id
        assert payload.role == "user"

    async def test_authenticate_wrong_password(self):
        self._stored_user()

        with pytest.raises(InvalidCredentialsError):
            await self.service.authenticate(TEST_EMAIL, "Wrong#1234")

    async def test_authenticate_unknown_email_still_hashes(self):
        self.user_repo.find_by_email.return_value = None
        self.password_service = Mock(wraps=self.password_service)
        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

        with pytest.raises(InvalidCredentialsError):
            await self.service.authenticate("nobody@example.com", TEST_PASSWORD)

        self.password_service.verify.assert_called_once_with(TEST_PASSWORD, None)

    # ------------------------------------------------------------------
    # resolve_identity
    # ------------------------------------------------------------------

    async def test_resolve_identity_uses_current_role(self):
        user = self._stored_user(UserRole.USER)
        token = self.service.create_token(user)
        user.change_role(UserRole.STORE_OWNER)

        identity = await self.service.resolve_identity(token)

        assert identity.user_id == user.id
        assert identity.role == UserRole.STORE_OWNER

    async def test_resolve_identity_deleted_user(self):
        user = self._stored_user()
        token = self.service.create_token(user)
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(InvalidTokenError):
            await self.service.resolve_identity(token)

    async def test_resolve_identity_expired_token(self):
        user = self._stored_user()
        token = self.jwt_service.create_access_token(
            user.id,
            user.name,
            user.email,
            user.role.value,
            expires_delta=timedelta(minutes=-5),
        )

        with pytest.raises(InvalidTokenError):
            await self.service.resolve_identity(token)

        self.user_repo.find_by_id.assert_not_called()

    # ------------------------------------------------------------------
    # change_password
    # ------------------------------------------------------------------

    async def test_change_password(self):
        user = self._stored_user()

        await self.service.change_password(user.id, TEST_PASSWORD, "Newpass#456")

        self.user_repo.set_password_hash.assert_awaited_once()
        new_hash = self.user_repo.set_password_hash.call_args.args[1]
        assert self.password_service.verify("Newpass#456", new_hash)

    async def test_change_password_wrong_current(self):
        user = self._stored_user()

        with pytest.raises(IncorrectPasswordError):
            await self.service.change_password(user.id, "Wrong#1234", "Newpass#456")

        self.user_repo.set_password_hash.assert_not_called()

    async def test_change_password_weak_new_password(self):
        user = self._stored_user()

        with pytest.raises(ValidationError) as exc_info:
            await self.service.change_password(user.id, TEST_PASSWORD, "weak")

        assert {e.field for e in exc_info.value.errors} == {"newPassword"}
