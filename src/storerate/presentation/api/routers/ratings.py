"""Rating router: submit, list, and delete ratings."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from storerate.application.commands.rating import (
    DeleteRatingCommand,
    SubmitRatingCommand,
)
from storerate.application.queries import (
    ListOwnRatingsQuery,
    ListRatingsForStoreQuery,
    ListRatingsQuery,
)
from storerate.domain.rating import SubmissionOutcome
from storerate.presentation.api.dependencies import RepoFactory
from storerate.presentation.api.schemas.ratings import (
    RatingDetailsResponse,
    RatingSubmitRequest,
    RatingSubmitResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LimitFilter = Annotated[
    int | None,
    Query(ge=1, le=1000, description="Max ratings to return"),
]


@router.get(
    "",
    summary="List all ratings",
    responses={
        200: {"description": "Ratings with user and store names, newest first"},
        403: {"description": "Admin access required"},
    },
)
async def list_ratings(
    factory: RepoFactory,
    limit: LimitFilter = None,
) -> list[RatingDetailsResponse]:
    """List every rating on the platform."""
    query = ListRatingsQuery.from_factory(factory)
    ratings = await query.execute(limit=limit)
    return [RatingDetailsResponse.model_validate(r) for r in ratings]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Submit a rating",
    responses={
        200: {"description": "Existing rating updated"},
        201: {"description": "Rating created"},
        400: {"description": "Rating must be an integer from 1 to 5"},
        403: {"description": "Only normal users can rate stores"},
        404: {"description": "Store not found"},
        409: {"description": "Store is deactivated"},
    },
)
async def submit_rating(
    request: RatingSubmitRequest,
    response: Response,
    factory: RepoFactory,
) -> RatingSubmitResponse:
    """
    Rate a store.

    Each user holds at most one rating per store: submitting again
    replaces the score and answers 200 instead of 201.
    """
    command = SubmitRatingCommand.from_factory(factory)
    try:
        rating, outcome = await command.execute(
            store_id=request.store_id,
            score=request.rating,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if outcome == SubmissionOutcome.UPDATED:
        response.status_code = status.HTTP_200_OK

    return RatingSubmitResponse(
        id=rating.id,
        user_id=rating.user_id,
        store_id=rating.store_id,
        rating=rating.score,
        created_at=rating.created_at,
        updated_at=rating.updated_at,
        outcome=outcome.value,
    )


@router.get(
    "/me",
    summary="List my ratings",
    responses={200: {"description": "The caller's ratings with store names"}},
)
async def list_own_ratings(factory: RepoFactory) -> list[RatingDetailsResponse]:
    query = ListOwnRatingsQuery.from_factory(factory)
    ratings = await query.execute()
    return [RatingDetailsResponse.model_validate(r) for r in ratings]


@router.get(
    "/store/{store_id}",
    summary="List ratings of a store",
    responses={
        200: {"description": "Ratings of the store, newest first"},
        403: {"description": "Store owners may only view their own store"},
        404: {"description": "Store not found"},
    },
)
async def list_store_ratings(
    store_id: UUID,
    factory: RepoFactory,
) -> list[RatingDetailsResponse]:
    query = ListRatingsForStoreQuery.from_factory(factory)
    ratings = await query.execute(store_id)
    return [RatingDetailsResponse.model_validate(r) for r in ratings]


@router.delete(
    "/{rating_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a rating",
    responses={
        204: {"description": "Rating deleted"},
        403: {"description": "Not the author"},
        404: {"description": "Rating not found"},
    },
)
async def delete_rating(
    rating_id: UUID,
    factory: RepoFactory,
) -> Response:
    """Delete a rating (its author or an admin)."""
    command = DeleteRatingCommand.from_factory(factory)
    try:
        await command.execute(rating_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)
