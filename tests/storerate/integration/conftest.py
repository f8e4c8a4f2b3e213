"""
Pytest configuration for storerate integration tests.

Persistence tests run against in-memory SQLite. Tests marked
``integration`` use the Testcontainers PostgreSQL fixtures instead.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    database,
    db_session,
    postgres_container,
    postgres_url,
)

__all__ = [
    "database",
    "db_session",
    "postgres_container",
    "postgres_url",
]
