"""Store commands."""

from storerate.application.commands.store.create_store_command import (
    CreateStoreCommand,
)
from storerate.application.commands.store.delete_store_command import (
    DeleteStoreCommand,
)
from storerate.application.commands.store.update_store_command import (
    UpdateStoreCommand,
)

__all__ = [
    "CreateStoreCommand",
    "DeleteStoreCommand",
    "UpdateStoreCommand",
]
