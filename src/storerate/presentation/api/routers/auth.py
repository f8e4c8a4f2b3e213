"""Authentication router: registration, login, current user, password change."""

import logging

from fastapi import APIRouter, status

from storerate.presentation.api.dependencies import (
    AppSettings,
    AuthService,
    CurrentIdentity,
    DBSession,
)
from storerate.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input (all field errors listed)"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """
    Create an account with role ``user``.

    Store owners and administrators are created by an administrator.
    """
    try:
        user = await auth_service.register(
            name=request.name,
            email=request.email,
            password=request.password,
            address=request.address,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return UserResponse.from_user(user)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: AppSettings,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Returns the user record and an access token. Unknown emails and
    wrong passwords get the same response.
    """
    user, access_token = await auth_service.authenticate(
        email=request.email,
        password=request.password,
    )
    return AuthResponse(
        user=UserResponse.from_user(user),
        access_token=access_token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
    )


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user profile"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(
    identity: CurrentIdentity,
    auth_service: AuthService,
) -> UserResponse:
    """Return the authenticated caller's own record."""
    user = await auth_service.get_current_user(identity)
    return UserResponse.from_user(user)


@router.put(
    "/password",
    summary="Change password",
    responses={
        200: {"description": "Password changed"},
        400: {"description": "Current password wrong or new password too weak"},
        401: {"description": "Not authenticated"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    identity: CurrentIdentity,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    """Replace the caller's password after checking the current one."""
    try:
        await auth_service.change_password(
            user_id=identity.user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="Password updated successfully")
