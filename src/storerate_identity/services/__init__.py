"""Identity services (password hashing, token signing)."""

from storerate_identity.services.jwt_service import JWTService
from storerate_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
