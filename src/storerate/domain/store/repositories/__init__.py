from storerate.domain.store.repositories.store_repository import StoreRepository

__all__ = ["StoreRepository"]
