"""User management router.

Listing, creating and deleting users is reserved for administrators.
Reading and updating a user is allowed for the user themself or an
administrator; only administrators may change roles.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from storerate.application.commands.user import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from storerate.application.queries import GetUserQuery, ListUsersQuery
from storerate.presentation.api.dependencies import RepoFactory
from storerate.presentation.api.schemas.auth import UserResponse
from storerate.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LimitFilter = Annotated[
    int | None,
    Query(ge=1, le=1000, description="Max users to return"),
]


@router.get(
    "",
    summary="List users",
    responses={
        200: {"description": "Users, newest first"},
        403: {"description": "Admin access required"},
    },
)
async def list_users(
    factory: RepoFactory,
    limit: LimitFilter = None,
) -> list[UserResponse]:
    """List all users. Store owners include their store's average rating."""
    query = ListUsersQuery.from_factory(factory)
    users = await query.execute(limit=limit)
    return [UserResponse.from_dto(u) for u in users]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created"},
        400: {"description": "Invalid input or unknown role"},
        403: {"description": "Admin access required"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(
    request: CreateUserRequest,
    factory: RepoFactory,
) -> UserResponse:
    """
    Create a user with any role.

    A ``store_owner`` gets their store provisioned from the same name,
    email and address.
    """
    command = CreateUserCommand.from_factory(factory)
    try:
        user = await command.execute(
            name=request.name,
            email=request.email,
            password=request.password,
            address=request.address,
            role=request.role,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_user(user)


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={
        200: {"description": "User details"},
        403: {"description": "Not your account"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: UUID,
    factory: RepoFactory,
) -> UserResponse:
    """Get a user by ID (self or admin)."""
    query = GetUserQuery.from_factory(factory)
    return UserResponse.from_dto(await query.execute(user_id))


@router.put(
    "/{user_id}",
    summary="Update a user",
    responses={
        200: {"description": "User updated"},
        400: {"description": "Invalid input, nothing to update, or own role change"},
        403: {"description": "Not your account"},
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    factory: RepoFactory,
) -> UserResponse:
    """
    Update profile fields and, for administrators, the role.

    Role changes provision or deactivate the user's store as needed.
    """
    command = UpdateUserCommand.from_factory(factory)
    try:
        user = await command.execute(
            user_id=user_id,
            name=request.name,
            email=request.email,
            address=request.address,
            role=request.role,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_user(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        204: {"description": "User and everything they own deleted"},
        400: {"description": "Cannot delete your own account"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: UUID,
    factory: RepoFactory,
) -> Response:
    """Delete a user, their ratings, and any store they own."""
    command = DeleteUserCommand.from_factory(factory)
    try:
        await command.execute(user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)
