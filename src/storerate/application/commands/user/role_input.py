from storerate_identity.domain.user import InvalidRoleError, UserRole


def parse_role(value: str | UserRole) -> UserRole:
    """Turn a role string into ``UserRole``."""
    try:
        return UserRole(value)
    except ValueError as e:
        raise InvalidRoleError(str(value)) from e
