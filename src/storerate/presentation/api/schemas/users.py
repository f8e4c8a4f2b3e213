"""User management schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """Request schema for an admin creating a user with any role."""

    name: str
    email: str
    password: str
    address: str | None = None
    role: str = Field(
        default="user",
        description="One of 'user', 'admin', 'store_owner'",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Margaret Eleanor Owens",
                "email": "margaret@example.com",
                "password": "Owner#2024",
                "address": "7 Harbour Road, Kingsport",
                "role": "store_owner",
            },
        },
    )


class UpdateUserRequest(BaseModel):
    """Partial update. ``role`` is only honoured for administrators."""

    name: str | None = None
    email: str | None = None
    address: str | None = None
    role: str | None = None
