from storerate.application.queries.user.user_queries import (
    GetUserQuery,
    ListUsersQuery,
)

__all__ = ["GetUserQuery", "ListUsersQuery"]
