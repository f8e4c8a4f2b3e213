"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── storerate/             # Stores, ratings, role transitions, API
    │   ├── unit/              # Fast, isolated tests (mocks only)
    │   └── integration/       # SQLite-backed persistence, API and CLI tests
    ├── storerate_identity/    # Users, passwords, tokens, access policy
    │   └── unit/
    └── shared/                # Shared fixtures and utilities

Tests marked ``@pytest.mark.integration`` need Docker (Testcontainers
PostgreSQL) and are skipped unless enabled.

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests

Pytest Options:
    --run-integration    Run integration tests
"""

import os

import pytest

from storerate_config import clear_settings_cache


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip Docker-backed tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with an empty settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
