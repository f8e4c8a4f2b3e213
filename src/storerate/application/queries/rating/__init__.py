from storerate.application.queries.rating.rating_queries import (
    ListOwnRatingsQuery,
    ListOwnStoreRatingsQuery,
    ListRatingsForStoreQuery,
    ListRatingsQuery,
)

__all__ = [
    "ListOwnRatingsQuery",
    "ListOwnStoreRatingsQuery",
    "ListRatingsForStoreQuery",
    "ListRatingsQuery",
]
