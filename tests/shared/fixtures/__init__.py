"""Shared test fixtures."""

from tests.shared.fixtures.database import (
    add_store,
    add_user,
    database,
    db_session,
    postgres_container,
    postgres_url,
)

__all__ = [
    "add_store",
    "add_user",
    "database",
    "db_session",
    "postgres_container",
    "postgres_url",
]
