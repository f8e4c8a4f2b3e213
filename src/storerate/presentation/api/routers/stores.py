"""Store router for listing, viewing, and managing stores."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from storerate.application.commands.store import (
    CreateStoreCommand,
    DeleteStoreCommand,
    UpdateStoreCommand,
)
from storerate.application.queries import (
    GetOwnStoreQuery,
    GetStoreQuery,
    ListOwnStoreRatingsQuery,
    ListStoresQuery,
)
from storerate.presentation.api.dependencies import RepoFactory
from storerate.presentation.api.schemas.ratings import RatingDetailsResponse
from storerate.presentation.api.schemas.stores import (
    StoreCreateRequest,
    StoreResponse,
    StoreUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LimitFilter = Annotated[
    int | None,
    Query(ge=1, le=1000, description="Max stores to return"),
]


@router.get(
    "",
    summary="List stores",
    responses={200: {"description": "Stores with their average rating"}},
)
async def list_stores(
    factory: RepoFactory,
    limit: LimitFilter = None,
) -> list[StoreResponse]:
    """
    List stores with their computed average rating.

    Deactivated stores are only listed for administrators.
    """
    query = ListStoresQuery.from_factory(factory)
    stores = await query.execute(limit=limit)
    return [StoreResponse.from_dto(s) for s in stores]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a store",
    responses={
        201: {"description": "Store created"},
        400: {"description": "Invalid input"},
        403: {"description": "Admin access required"},
        404: {"description": "Owner not found"},
        409: {"description": "Owner already has an active store"},
    },
)
async def create_store(
    request: StoreCreateRequest,
    factory: RepoFactory,
) -> StoreResponse:
    """Create a store, optionally assigning (and promoting) an owner."""
    command = CreateStoreCommand.from_factory(factory)
    try:
        store = await command.execute(
            name=request.name,
            email=request.email,
            address=request.address,
            owner_id=request.owner_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return StoreResponse.from_dto(
        await GetStoreQuery.from_factory(factory).execute(store.id),
    )


@router.get(
    "/me",
    summary="Get my store",
    responses={
        200: {"description": "The caller's store"},
        403: {"description": "Store owner access required"},
        404: {"description": "No store assigned"},
    },
)
async def get_own_store(factory: RepoFactory) -> StoreResponse:
    """Return the store owned by the calling store owner."""
    query = GetOwnStoreQuery.from_factory(factory)
    return StoreResponse.from_dto(await query.execute())


@router.get(
    "/me/ratings",
    summary="List ratings of my store",
    responses={
        200: {"description": "Ratings with author names, newest first"},
        403: {"description": "Store owner access required"},
        404: {"description": "No store assigned"},
    },
)
async def list_own_store_ratings(
    factory: RepoFactory,
) -> list[RatingDetailsResponse]:
    """List who rated the caller's store and with what score."""
    query = ListOwnStoreRatingsQuery.from_factory(factory)
    ratings = await query.execute()
    return [RatingDetailsResponse.model_validate(r) for r in ratings]


@router.get(
    "/{store_id}",
    summary="Get a store",
    responses={
        200: {"description": "Store details"},
        404: {"description": "Store not found"},
    },
)
async def get_store(
    store_id: UUID,
    factory: RepoFactory,
) -> StoreResponse:
    """Get a store with its average rating and rating count."""
    query = GetStoreQuery.from_factory(factory)
    return StoreResponse.from_dto(await query.execute(store_id))


@router.put(
    "/{store_id}",
    summary="Update a store",
    responses={
        200: {"description": "Store updated"},
        400: {"description": "Invalid input or nothing to update"},
        403: {"description": "Not the owner"},
        404: {"description": "Store not found"},
    },
)
async def update_store(
    store_id: UUID,
    request: StoreUpdateRequest,
    factory: RepoFactory,
) -> StoreResponse:
    """Update store details (admin or the store's owner)."""
    command = UpdateStoreCommand.from_factory(factory)
    try:
        await command.execute(
            store_id=store_id,
            name=request.name,
            email=request.email,
            address=request.address,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return StoreResponse.from_dto(
        await GetStoreQuery.from_factory(factory).execute(store_id),
    )


@router.delete(
    "/{store_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a store",
    responses={
        204: {"description": "Store and its ratings deleted"},
        403: {"description": "Admin access required"},
        404: {"description": "Store not found"},
    },
)
async def delete_store(
    store_id: UUID,
    factory: RepoFactory,
) -> Response:
    """Delete a store together with all of its ratings."""
    command = DeleteStoreCommand.from_factory(factory)
    try:
        await command.execute(store_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)
