"""Authentication schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from storerate.application.dtos import UserDTO
from storerate_identity.domain.user import User


class RegisterRequest(BaseModel):
    """Request schema for self-registration.

    Field rules are checked by the domain so every problem is reported
    at once: name 20-60 characters, a valid email, password 8-16
    characters with an uppercase letter and one of ``!@#$%^&*``,
    address up to 400 characters.
    """

    name: str = Field(..., description="Full name (20-60 characters)")
    email: str = Field(..., description="Email address (unique)")
    password: str = Field(..., description="Password (8-16 characters)")
    address: str | None = Field(default=None, description="Postal address")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jonathan Quincy Adams",
                "email": "jonathan@example.com",
                "password": "Secret#123",
                "address": "12 Market Street, Springfield",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jonathan@example.com",
                "password": "Secret#123",
            },
        },
    )


class ChangePasswordRequest(BaseModel):
    """Request schema for changing the caller's password."""

    current_password: str = Field(
        ...,
        validation_alias=AliasChoices("current_password", "currentPassword"),
    )
    new_password: str = Field(
        ...,
        validation_alias=AliasChoices("new_password", "newPassword"),
    )


class UserResponse(BaseModel):
    """Response schema for user data. Never includes the password hash."""

    id: UUID
    name: str
    email: str
    address: str | None
    role: str
    created_at: datetime
    updated_at: datetime
    rating: float | None = Field(
        default=None,
        description="Average rating of the user's store (store owners only)",
    )

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls.from_dto(UserDTO.from_user(user))

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls.model_validate(dto)


class AuthResponse(BaseModel):
    """Response for login: the user record and a bearer token."""

    user: UserResponse
    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "name": "Jonathan Quincy Adams",
                    "email": "jonathan@example.com",
                    "address": "12 Market Street, Springfield",
                    "role": "user",
                    "created_at": "2024-12-05T14:30:00Z",
                    "updated_at": "2024-12-05T14:30:00Z",
                    "rating": None,
                },
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 86400,
            },
        },
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
