"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Serve with uvicorn's factory mode (see ``storerate serve``)::

    uvicorn storerate.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storerate.infrastructure.persistence.sqlalchemy.database import Database
from storerate.infrastructure.persistence.sqlalchemy.init_db import display_url
from storerate.presentation.api.exception_handlers import setup_exception_handlers
from storerate.presentation.api.routers import (
    auth_router,
    dashboard_router,
    ratings_router,
    stores_router,
    users_router,
)
from storerate.presentation.api.schemas.common import HealthResponse
from storerate_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the storerate application with:
    - Console output with timestamps and module names
    - Configurable log level for storerate modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("storerate").setLevel(log_level)
    logging.getLogger("storerate_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login, and password management.

**Security:**
- Passwords are hashed with bcrypt
- Stateless HS256 JWT bearer tokens (24h by default)
- Every request reloads the caller, so role changes apply immediately
""",
    },
    {
        "name": "Users",
        "description": """User administration.

**Roles:**
- `user`: rates stores
- `store_owner`: views ratings and statistics of their own store
- `admin`: manages users and stores

Promoting a user to `store_owner` provisions a store; demoting a store
owner deactivates it (ratings are kept).
""",
    },
    {
        "name": "Stores",
        "description": "Stores with their computed average rating.",
    },
    {
        "name": "Ratings",
        "description": """Store ratings (integer scores 1-5).

A user has at most one rating per store. Submitting again replaces the
score: `201 Created` the first time, `200 OK` afterwards.
""",
    },
    {
        "name": "Dashboard",
        "description": "Platform totals for admins and store statistics for owners.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the process-wide Database handle (unless one was injected),
    makes sure the schema exists, and disposes the pool on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)

    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        app.state.database = Database.from_settings(settings)
        logger.info("Database: %s", display_url(settings.database_url))

    database: Database = app.state.database
    try:
        await database.create_tables()
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    yield

    logger.info("Shutting down %s API...", settings.app_name)
    if owns_database:
        await database.dispose()
        app.state.database = None
        logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    v1_router.include_router(stores_router, prefix="/stores", tags=["Stores"])
    v1_router.include_router(ratings_router, prefix="/ratings", tags=["Ratings"])
    v1_router.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])

    return v1_router


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    database
        Optional pre-built Database handle. When omitted, the lifespan
        creates one from ``settings`` and disposes it at shutdown.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Store **rating platform** with role-based access for users, "
            "store owners, and administrators."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
