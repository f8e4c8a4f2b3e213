"""Store domain exceptions."""

from storerate.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class StoreNotFoundError(EntityNotFoundError):
    """Store not found, looked up either by id or by owner."""

    def __init__(
        self,
        store_id: object | None = None,
        owner_id: object | None = None,
    ) -> None:
        self.store_id = store_id
        self.owner_id = owner_id
        details = {}
        if store_id is not None:
            details["store_id"] = str(store_id)
        if owner_id is not None:
            details["owner_id"] = str(owner_id)
        super().__init__(
            "Store not found",
            code=ErrorCode.STORE_NOT_FOUND,
            details=details,
        )


class StoreInactiveError(ConflictError):
    """Store has been deactivated and does not accept new ratings."""

    def __init__(self, store_id: object) -> None:
        self.store_id = store_id
        super().__init__(
            "Store is not accepting ratings",
            code=ErrorCode.STORE_INACTIVE,
            details={"store_id": str(store_id)},
        )


class StoreAlreadyOwnedError(ConflictError):
    """The intended owner already owns a store (active or not)."""

    def __init__(self, owner_id: object) -> None:
        self.owner_id = owner_id
        super().__init__(
            "User already owns a store",
            code=ErrorCode.STORE_ALREADY_OWNED,
            details={"owner_id": str(owner_id)},
        )
