"""Role-based access policy."""

from storerate_identity.domain.access.access_policy import (
    AccessPolicy,
    Action,
    Decision,
    QueryScope,
    Resource,
)

__all__ = [
    "AccessPolicy",
    "Action",
    "Decision",
    "QueryScope",
    "Resource",
]
