"""Store schemas for API request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from storerate.application.dtos import StoreDTO


class StoreCreateRequest(BaseModel):
    """Request schema for creating a store."""

    name: str = Field(..., description="Store name (20-60 characters)")
    email: str = Field(..., description="Contact email")
    address: str | None = Field(default=None, description="Postal address")
    owner_id: UUID | None = Field(
        default=None,
        description="Existing user to make the owner (promoted to store_owner)",
    )


class StoreUpdateRequest(BaseModel):
    """Partial store update."""

    name: str | None = None
    email: str | None = None
    address: str | None = None


class StoreResponse(BaseModel):
    """Store with its computed average rating."""

    id: UUID
    name: str
    email: str
    address: str | None
    owner_id: UUID | None
    active: bool
    average_rating: float | None = Field(
        ...,
        description="Mean score, null while the store has no ratings",
    )
    rating_count: int | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "a1c2e3f4-0000-4000-8000-000000000001",
                "name": "Harbour Road General Store",
                "email": "hello@harbourstore.example",
                "address": "7 Harbour Road, Kingsport",
                "owner_id": "550e8400-e29b-41d4-a716-446655440000",
                "active": True,
                "average_rating": 4.25,
                "rating_count": 4,
                "created_at": "2024-12-05T14:30:00Z",
                "updated_at": "2024-12-05T14:30:00Z",
            },
        },
    )

    @classmethod
    def from_dto(cls, dto: StoreDTO) -> "StoreResponse":
        return cls.model_validate(dto)
