"""Field-level input validation that collects every failure.

Validators never stop at the first problem: each check appends a
FieldError and ``raise_if_invalid`` reports them all together.
"""

import re

from storerate.domain.shared.exceptions import FieldError, ValidationError

# Simple but effective email regex
# Validates: user@domain.tld (minimum requirements)
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

NAME_MIN_LENGTH = 20
NAME_MAX_LENGTH = 60
ADDRESS_MAX_LENGTH = 400


class InputValidator:
    """Accumulates field errors for one request payload."""

    def __init__(self) -> None:
        self._errors: list[FieldError] = []

    @property
    def errors(self) -> list[FieldError]:
        return list(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def add(self, field: str, message: str) -> None:
        self._errors.append(FieldError(field=field, message=message))

    def extend(self, field: str, messages: list[str]) -> None:
        for message in messages:
            self.add(field, message)

    def check_name(self, value: str | None, field: str = "name") -> None:
        if value is None or not (NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH):
            self.add(
                field,
                f"Name must be between {NAME_MIN_LENGTH} and "
                f"{NAME_MAX_LENGTH} characters",
            )

    def check_email(self, value: str | None, field: str = "email") -> None:
        if not value or not EMAIL_PATTERN.match(value.strip()):
            self.add(field, "Please enter a valid email")

    def check_address(self, value: str | None, field: str = "address") -> None:
        if value is not None and len(value) > ADDRESS_MAX_LENGTH:
            self.add(
                field,
                f"Address must not exceed {ADDRESS_MAX_LENGTH} characters",
            )

    def raise_if_invalid(self, message: str = "Invalid input") -> None:
        if self._errors:
            raise ValidationError(message, errors=self._errors)
