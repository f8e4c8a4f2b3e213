"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    name
        Display name at the time the token was issued
    email
        The user's email address
    role
        Role value at the time the token was issued
    exp
        Token expiration timestamp
    """

    user_id: UUID
    name: str
    email: str
    role: str
    exp: datetime
