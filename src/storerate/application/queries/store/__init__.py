from storerate.application.queries.store.store_queries import (
    GetOwnStoreQuery,
    GetStoreQuery,
    ListStoresQuery,
)

__all__ = [
    "GetOwnStoreQuery",
    "GetStoreQuery",
    "ListStoresQuery",
]
