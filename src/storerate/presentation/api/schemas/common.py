"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class FieldErrorResponse(BaseModel):
    """A single invalid input field."""

    field: str = Field(..., description="Name of the offending field")
    message: str = Field(..., description="What is wrong with it")


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")
    errors: list[FieldErrorResponse] | None = Field(
        default=None,
        description="Per-field problems (validation errors only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Store not found", "code": "STORE_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
