"""Rating schemas for API request/response models."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RatingSubmitRequest(BaseModel):
    """Create or replace the caller's rating for a store."""

    store_id: UUID = Field(
        ...,
        validation_alias=AliasChoices("store_id", "storeId"),
    )
    # Checked by the domain so non-integers get INVALID_SCORE
    rating: Any = Field(..., description="Integer score from 1 to 5")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "store_id": "a1c2e3f4-0000-4000-8000-000000000001",
                "rating": 4,
            },
        },
    )


class RatingResponse(BaseModel):
    """A stored rating."""

    id: UUID
    user_id: UUID
    store_id: UUID
    rating: int
    created_at: datetime
    updated_at: datetime


class RatingSubmitResponse(RatingResponse):
    """Rating plus whether it was created or updated."""

    outcome: str = Field(..., description="'created' or 'updated'")


class RatingDetailsResponse(BaseModel):
    """Rating joined with its author and store."""

    id: UUID
    user_id: UUID
    store_id: UUID
    rating: int = Field(..., validation_alias=AliasChoices("rating", "score"))
    user_name: str
    user_email: str
    store_name: str
    store_address: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
