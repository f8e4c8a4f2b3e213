"""Password hashing service using bcrypt.

Provides secure password hashing and verification together with the
password strength rules applied at registration and password change.
"""

import bcrypt

from storerate_identity.domain.user.validation import password_problems
from storerate_identity.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a configurable work factor.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hash = service.hash("Secret#123")
    >>> service.verify("Secret#123", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests use the bcrypt minimum of 4.
        """
        self._rounds = rounds
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        """Hash a plaintext password after checking its strength.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Verify a password against a hash in constant time.

        When ``password_hash`` is None (unknown account) a dummy hash is
        checked instead, so the call costs the same either way.

        Returns
        -------
        True if password matches, False otherwise
        """
        if password_hash is None:
            self._check(password, self._get_dummy_hash())
            return False
        return self._check(password, password_hash)

    def validate_strength(self, password: str, field: str = "password") -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Between 8 and 16 characters
        - At least one uppercase letter
        - At least one of ``!@#$%^&*``

        Raises
        ------
        WeakPasswordError
            Listing every rule the password breaks
        """
        problems = password_problems(password)
        if problems:
            raise WeakPasswordError(problems=problems, field=field)

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            salt = bcrypt.gensalt(rounds=self._rounds)
            self._dummy_hash = bcrypt.hashpw(b"dummy-password", salt).decode("utf-8")
        return self._dummy_hash

    @staticmethod
    def _check(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False
