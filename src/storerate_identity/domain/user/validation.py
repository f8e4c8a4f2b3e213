"""User input rules shared by registration and admin user management."""

from storerate.domain.shared.validation import InputValidator

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16
PASSWORD_SYMBOLS = "!@#$%^&*"


def password_problems(password: str | None) -> list[str]:
    """Return every password rule the given value breaks."""
    if not password:
        return ["Password is required"]

    problems = []
    if not (PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH):
        problems.append(
            f"Password must be between {PASSWORD_MIN_LENGTH} and "
            f"{PASSWORD_MAX_LENGTH} characters",
        )
    if not any(ch.isupper() for ch in password):
        problems.append("Password must contain at least one uppercase letter")
    if not any(ch in PASSWORD_SYMBOLS for ch in password):
        problems.append("Password must contain at least one special character")
    return problems


def validate_new_user(
    name: str | None,
    email: str | None,
    password: str | None,
    address: str | None,
) -> InputValidator:
    """Check a new account's fields, collecting all failures."""
    validator = InputValidator()
    validator.check_name(name)
    validator.check_email(email)
    validator.extend("password", password_problems(password))
    validator.check_address(address)
    return validator
