"""Process-wide database handle (engine and session factory).

One ``Database`` is created when the application starts, shared by all
requests through dependency injection, and disposed at shutdown.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Import models to register with Base.metadata
import storerate.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import storerate_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from storerate.infrastructure.persistence.sqlalchemy.models.base import Base

if TYPE_CHECKING:
    from storerate_config.settings import Settings

logger = logging.getLogger(__name__)


def _on_sqlite_connect(dbapi_connection, connection_record) -> None:  # NOQA: ARG001
    # Let SQLAlchemy emit BEGIN itself (see _begin_sqlite_immediate)
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_sqlite_immediate(conn) -> None:
    # Take the write lock up front so concurrent writers queue on the busy
    # timeout instead of failing with "database is locked" on lock upgrade.
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_database_engine(
    url: str,
    timeout_seconds: float = 10.0,
    pool_size: int = 10,
    echo: bool = False,
) -> AsyncEngine:
    """Create an async engine with every database call bounded by a timeout.

    For SQLite the timeout is the driver's lock wait; for PostgreSQL it is
    the connect timeout plus asyncpg's per-statement ``command_timeout``.
    Pool checkout waits at most the same amount of time.
    """
    parsed = make_url(url)
    kwargs: dict[str, Any] = {"echo": echo}

    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"timeout": timeout_seconds}
        database = parsed.database or ""
        if database in ("", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty db
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"]["check_same_thread"] = False
        else:
            Path(database).parent.mkdir(parents=True, exist_ok=True)
    else:
        kwargs["pool_pre_ping"] = True
        kwargs["pool_size"] = pool_size
        kwargs["pool_timeout"] = timeout_seconds
        if parsed.get_backend_name() == "postgresql":
            kwargs["connect_args"] = {
                "timeout": timeout_seconds,
                "command_timeout": timeout_seconds,
            }

    engine = create_async_engine(url, **kwargs)

    if parsed.get_backend_name() == "sqlite":
        event.listen(engine.sync_engine, "connect", _on_sqlite_connect)
        event.listen(engine.sync_engine, "begin", _begin_sqlite_immediate)

    return engine


class Database:
    """Engine plus session factory for one database."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_url(
        cls,
        url: str,
        timeout_seconds: float = 10.0,
        pool_size: int = 10,
    ) -> Database:
        return cls(create_database_engine(url, timeout_seconds, pool_size))

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        return cls.from_url(
            settings.database_url,
            timeout_seconds=settings.database_timeout_seconds,
            pool_size=settings.database_pool_size,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        return self._session_maker

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_maker() as session:
            yield session

    async def create_tables(self) -> None:
        """
        Create all database tables (idempotent).

        Uses SQLAlchemy's create_all() which only creates missing tables.
        Existing tables and their data are never modified or deleted.
        """
        logger.info("Ensuring all database tables exist...")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema is up to date (missing tables created if needed)")

    async def drop_tables(self) -> None:
        """Drop all database tables (USE WITH CAUTION!)."""
        logger.warning("Dropping all database tables...")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine.dispose()
        logger.debug("Database engine disposed")
