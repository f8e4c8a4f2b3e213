"""Tests for the storerate Typer CLI."""

import asyncio

import pytest
from typer.testing import CliRunner

from storerate.infrastructure.persistence.sqlalchemy.database import Database
from storerate.presentation.cli.app import app
from storerate_config import clear_settings_cache
from storerate_identity.domain.user import UserRole
from storerate_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import sqlite_file_url

runner = CliRunner()

ADMIN_ARGS = [
    "admin",
    "create",
    "--name",
    "Platform Administrator Account",
    "--email",
    "Root@Example.com",
    "--password",
    "Admin#Pass1",
]


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at a throwaway SQLite database."""
    url = sqlite_file_url(tmp_path / "cli.db")
    monkeypatch.setenv("JWT_SECRET_KEY", "cli-test-secret")
    monkeypatch.setenv("DATABASE_URL_OVERRIDE", url)
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    clear_settings_cache()
    yield url
    clear_settings_cache()


async def _find_user(url: str, email: str):
    database = Database.from_url(url)
    try:
        async with database.session() as session:
            return await UserRepositorySQLAlchemy(session).find_by_email(email)
    finally:
        await database.dispose()


def test_generate_secrets():
    result = runner.invoke(app, ["secrets", "generate"])

    assert result.exit_code == 0
    assert "JWT_SECRET_KEY" in result.output
    assert "POSTGRES_PASSWORD" in result.output


def test_db_init_creates_schema(cli_env):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    assert "up to date" in result.output


def test_admin_create(cli_env):
    result = runner.invoke(app, ADMIN_ARGS)

    assert result.exit_code == 0, result.output
    user = asyncio.run(_find_user(cli_env, "root@example.com"))
    assert user.role == UserRole.ADMIN


def test_admin_create_twice_fails(cli_env):
    runner.invoke(app, ADMIN_ARGS)

    result = runner.invoke(app, ADMIN_ARGS)

    assert result.exit_code == 1
    assert "already" in result.output.lower()


def test_admin_create_rejects_weak_password(cli_env):
    args = [*ADMIN_ARGS[:-1], "weak"]

    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert "password" in result.output
