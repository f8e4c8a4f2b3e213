"""Unit tests for SubmitRatingCommand check ordering."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from storerate.application.commands.rating import SubmitRatingCommand
from storerate.domain.rating import InvalidScoreError, Rating, Score, SubmissionOutcome
from storerate.domain.shared.exceptions import AccessDeniedError
from storerate.domain.store import Store, StoreInactiveError, StoreNotFoundError
from storerate_identity.application.context import UserContext
from storerate_identity.domain.user import UserRole

STORE_NAME = "Corner Shop On Main Street"


def _identity(role: UserRole) -> UserContext:
    return UserContext(
        user_id=uuid4(),
        name="Some Caller With Long Name",
        email=f"{role.value}@example.com",
        role=role,
    )


class TestSubmitRatingCommand:
    def setup_method(self):
        self.store_repo = AsyncMock()
        self.rating_repo = AsyncMock()
        self.store = Store.create(name=STORE_NAME, email="shop@example.com")

    def _command(self, role: UserRole = UserRole.USER) -> SubmitRatingCommand:
        self.identity = _identity(role)
        return SubmitRatingCommand(
            store_repository=self.store_repo,
            rating_repository=self.rating_repo,
            current_user=self.identity,
        )

    async def test_creates_rating(self):
        command = self._command()
        self.store_repo.find_by_id.return_value = self.store
        rating = Rating(self.identity.user_id, self.store.id, 4)
        self.rating_repo.upsert.return_value = (rating, SubmissionOutcome.CREATED)

        result, outcome = await command.execute(self.store.id, 4)

        assert outcome == SubmissionOutcome.CREATED
        assert result.score == 4
        self.rating_repo.upsert.assert_awaited_once_with(
            self.identity.user_id,
            self.store.id,
            Score(4),
        )

    async def test_invalid_score_checked_before_role(self):
        command = self._command(UserRole.ADMIN)

        with pytest.raises(InvalidScoreError):
            await command.execute(self.store.id, 6)

        self.store_repo.find_by_id.assert_not_awaited()

    @pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.STORE_OWNER])
    async def test_only_normal_users_may_rate(self, role):
        command = self._command(role)

        with pytest.raises(AccessDeniedError):
            await command.execute(uuid4(), 3)

        self.store_repo.find_by_id.assert_not_awaited()

    async def test_missing_store(self):
        command = self._command()
        self.store_repo.find_by_id.return_value = None

        with pytest.raises(StoreNotFoundError):
            await command.execute(uuid4(), 3)

        self.rating_repo.upsert.assert_not_awaited()

    async def test_inactive_store(self):
        command = self._command()
        self.store.deactivate()
        self.store_repo.find_by_id.return_value = self.store

        with pytest.raises(StoreInactiveError):
            await command.execute(self.store.id, 3)

        self.rating_repo.upsert.assert_not_awaited()
