"""Pydantic schemas for API request/response models."""

from storerate.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)
from storerate.presentation.api.schemas.common import (
    ErrorResponse,
    FieldErrorResponse,
    HealthResponse,
)
from storerate.presentation.api.schemas.dashboard import (
    DashboardStatsResponse,
    ScoreCountResponse,
    StoreOwnerStatsResponse,
)
from storerate.presentation.api.schemas.ratings import (
    RatingDetailsResponse,
    RatingResponse,
    RatingSubmitRequest,
    RatingSubmitResponse,
)
from storerate.presentation.api.schemas.stores import (
    StoreCreateRequest,
    StoreResponse,
    StoreUpdateRequest,
)
from storerate.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
)

__all__ = [
    # Auth
    "AuthResponse",
    "ChangePasswordRequest",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "UserResponse",
    # Common
    "ErrorResponse",
    "FieldErrorResponse",
    "HealthResponse",
    # Dashboard
    "DashboardStatsResponse",
    "ScoreCountResponse",
    "StoreOwnerStatsResponse",
    # Ratings
    "RatingDetailsResponse",
    "RatingResponse",
    "RatingSubmitRequest",
    "RatingSubmitResponse",
    # Stores
    "StoreCreateRequest",
    "StoreResponse",
    "StoreUpdateRequest",
    # Users
    "CreateUserRequest",
    "UpdateUserRequest",
]
