"""FastAPI dependency injection for the StoreRate API.

Provides dependencies for:
- Settings and the process-wide Database handle (both on app.state)
- Database sessions
- Authentication (current identity from JWT)
- The request-scoped repository factory
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.domain.shared.exceptions import AuthenticationRequiredError
from storerate.infrastructure.persistence.sqlalchemy.database import Database
from storerate.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from storerate_config.settings import Settings
from storerate_identity.application.context import UserContext
from storerate_identity.application.services import AuthenticationService
from storerate_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from storerate_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Settings & Database
# -----------------------------------------------------------------------------


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_database(request: Request) -> Database:
    """The Database handle created at startup."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with database.session() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: AppSettings) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(settings: AppSettings) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Identity (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_identity(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UserContext:
    """
    FastAPI dependency to get the current authenticated caller from JWT.

    Verifies the bearer token and reloads the account, so a deleted
    user or a changed role takes effect on the very next request.

    Raises
    ------
    AuthenticationRequiredError
        If no bearer token was sent
    InvalidTokenError
        If the token is malformed, expired, badly signed, or its user is gone
    """
    if credentials is None:
        raise AuthenticationRequiredError

    return await auth_service.resolve_identity(credentials.credentials)


# Type alias for injected current identity
CurrentIdentity = Annotated[UserContext, Depends(get_current_identity)]


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(
    session: DBSession,
    identity: CurrentIdentity,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for the current caller.

    Application commands and queries are built from it with their
    ``from_factory()`` classmethods.
    """
    return SQLAlchemyRepositoryFactory(
        session=session,
        current_user=identity,
        password_service=password_service,
    )


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
