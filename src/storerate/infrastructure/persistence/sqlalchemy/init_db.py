"""Database initialization utilities."""

import asyncio
import logging

from storerate.infrastructure.persistence.sqlalchemy.database import Database
from storerate_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def display_url(database_url: str) -> str:
    """Strip credentials from a database URL for printing."""
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def create_tables(settings: Settings | None = None) -> None:
    """Create all missing tables for the configured database."""
    settings = settings or get_settings()
    database = Database.from_settings(settings)
    try:
        await database.create_tables()
    finally:
        await database.dispose()


async def _init_database() -> None:
    settings = get_settings()

    logger.info("Initializing database...")
    logger.info("Database URL: %s", display_url(settings.database_url))

    await create_tables(settings)

    logger.info("Database initialized successfully!")


def db_init() -> None:
    """Initialize database (create tables)."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_init_database())
