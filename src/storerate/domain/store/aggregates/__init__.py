from storerate.domain.store.aggregates.store import Store

__all__ = ["Store"]
