"""Dashboard schemas for API request/response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DashboardStatsResponse(BaseModel):
    """Platform totals for administrators."""

    total_users: int = Field(..., description="Number of registered users")
    total_stores: int = Field(..., description="Number of stores (incl. deactivated)")
    total_ratings: int = Field(..., description="Number of ratings")

    model_config = ConfigDict(from_attributes=True)


class ScoreCountResponse(BaseModel):
    """How many ratings carry a given score."""

    score: int
    count: int

    model_config = ConfigDict(from_attributes=True)


class StoreOwnerStatsResponse(BaseModel):
    """Aggregates for the caller's own store."""

    store_id: UUID
    store_name: str
    total_ratings: int
    average_rating: float | None = Field(
        ...,
        description="Mean score, null while unrated (never 0)",
    )
    distribution: list[ScoreCountResponse] = Field(
        default_factory=list,
        description="Counts per score, highest score first",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "store_id": "a1c2e3f4-0000-4000-8000-000000000001",
                "store_name": "Harbour Road General Store",
                "total_ratings": 3,
                "average_rating": 4.0,
                "distribution": [
                    {"score": 5, "count": 1},
                    {"score": 4, "count": 1},
                    {"score": 3, "count": 1},
                ],
            },
        },
    )
