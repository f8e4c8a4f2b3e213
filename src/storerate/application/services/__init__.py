"""Application services."""

from storerate.application.services.role_transition_service import (
    ROLE_TRANSITIONS,
    RoleTransitionEffect,
    RoleTransitionService,
    transition_effect,
)

__all__ = [
    "ROLE_TRANSITIONS",
    "RoleTransitionEffect",
    "RoleTransitionService",
    "transition_effect",
]
