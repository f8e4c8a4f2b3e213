"""Query layer. Read-only operations for retrieving data."""

from storerate.application.queries.dashboard import (
    DashboardStatsQuery,
    StoreOwnerStatsQuery,
)
from storerate.application.queries.rating import (
    ListOwnRatingsQuery,
    ListOwnStoreRatingsQuery,
    ListRatingsForStoreQuery,
    ListRatingsQuery,
)
from storerate.application.queries.store import (
    GetOwnStoreQuery,
    GetStoreQuery,
    ListStoresQuery,
)
from storerate.application.queries.user import GetUserQuery, ListUsersQuery

__all__ = [
    "DashboardStatsQuery",
    "GetOwnStoreQuery",
    "GetStoreQuery",
    "GetUserQuery",
    "ListOwnRatingsQuery",
    "ListOwnStoreRatingsQuery",
    "ListRatingsForStoreQuery",
    "ListRatingsQuery",
    "ListStoresQuery",
    "ListUsersQuery",
    "StoreOwnerStatsQuery",
]
