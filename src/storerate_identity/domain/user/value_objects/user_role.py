from enum import Enum


class UserRole(str, Enum):
    """User roles (who rates, who owns a store, who administers)."""

    USER = "user"
    ADMIN = "admin"
    STORE_OWNER = "store_owner"
