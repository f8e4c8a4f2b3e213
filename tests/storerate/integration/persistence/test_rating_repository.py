"""Integration tests for RatingRepositorySQLAlchemy."""

from uuid import uuid4

import pytest

from storerate.domain.rating import Score, SubmissionOutcome
from storerate.domain.store import StoreNotFoundError
from storerate.infrastructure.persistence.sqlalchemy.repositories import (
    RatingRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import add_store, add_user


async def test_upsert_creates_then_updates(db_session):
    user = await add_user(db_session)
    store = await add_store(db_session)
    repo = RatingRepositorySQLAlchemy(db_session)

    first, first_outcome = await repo.upsert(user.id, store.id, Score(4))
    second, second_outcome = await repo.upsert(user.id, store.id, Score(2))

    assert first_outcome == SubmissionOutcome.CREATED
    assert second_outcome == SubmissionOutcome.UPDATED
    assert second.id == first.id
    assert second.score == 2
    assert await repo.count() == 1


async def test_same_user_rates_two_stores(db_session):
    user = await add_user(db_session)
    store_a = await add_store(db_session, email="a@example.com")
    store_b = await add_store(db_session, email="b@example.com")
    repo = RatingRepositorySQLAlchemy(db_session)

    await repo.upsert(user.id, store_a.id, Score(5))
    await repo.upsert(user.id, store_b.id, Score(1))

    assert await repo.count() == 2
    found = await repo.find_by_user_and_store(user.id, store_b.id)
    assert found.score == 1


async def test_upsert_for_missing_store(db_session):
    user = await add_user(db_session)
    repo = RatingRepositorySQLAlchemy(db_session)

    with pytest.raises(StoreNotFoundError):
        await repo.upsert(user.id, uuid4(), Score(3))


async def test_delete_by_user_and_store(db_session):
    alice = await add_user(db_session, email="alice@example.com")
    bob = await add_user(db_session, email="bob@example.com")
    store = await add_store(db_session)
    repo = RatingRepositorySQLAlchemy(db_session)
    await repo.upsert(alice.id, store.id, Score(3))
    await repo.upsert(bob.id, store.id, Score(4))

    assert await repo.delete_by_user(alice.id) == 1
    assert await repo.find_by_user_and_store(alice.id, store.id) is None

    assert await repo.delete_by_store(store.id) == 1
    assert await repo.count() == 0


async def test_delete_single_rating(db_session):
    user = await add_user(db_session)
    store = await add_store(db_session)
    repo = RatingRepositorySQLAlchemy(db_session)
    rating, _ = await repo.upsert(user.id, store.id, Score(3))

    await repo.delete(rating.id)

    assert await repo.find_by_id(rating.id) is None
