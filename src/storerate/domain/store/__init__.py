"""Store domain: rateable stores and their ownership."""

from storerate.domain.store.aggregates import Store
from storerate.domain.store.exceptions import (
    StoreAlreadyOwnedError,
    StoreInactiveError,
    StoreNotFoundError,
)
from storerate.domain.store.repositories import StoreRepository

__all__ = [
    "Store",
    "StoreAlreadyOwnedError",
    "StoreInactiveError",
    "StoreNotFoundError",
    "StoreRepository",
]
