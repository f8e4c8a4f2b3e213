"""Dashboard router for platform and store-owner statistics."""

from fastapi import APIRouter

from storerate.application.queries import DashboardStatsQuery, StoreOwnerStatsQuery
from storerate.presentation.api.dependencies import RepoFactory
from storerate.presentation.api.schemas.dashboard import (
    DashboardStatsResponse,
    StoreOwnerStatsResponse,
)

router = APIRouter()


@router.get(
    "/stats",
    summary="Platform totals",
    responses={
        200: {"description": "Total users, stores, and ratings"},
        403: {"description": "Admin access required"},
    },
)
async def get_stats(factory: RepoFactory) -> DashboardStatsResponse:
    query = DashboardStatsQuery.from_factory(factory)
    return DashboardStatsResponse.model_validate(await query.execute())


@router.get(
    "/store",
    summary="My store statistics",
    responses={
        200: {"description": "Rating count, average, and distribution"},
        403: {"description": "Store owner access required"},
        404: {"description": "No store assigned"},
    },
)
async def get_store_stats(factory: RepoFactory) -> StoreOwnerStatsResponse:
    """
    Aggregates for the caller's store.

    ``average_rating`` is null while the store has no ratings.
    """
    query = StoreOwnerStatsQuery.from_factory(factory)
    return StoreOwnerStatsResponse.model_validate(await query.execute())
