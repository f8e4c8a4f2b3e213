"""Rating domain exceptions."""

from storerate.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    FieldError,
    ValidationError,
)


class InvalidScoreError(ValidationError):
    """Score is not an integer between 1 and 5."""

    def __init__(self, value: object) -> None:
        self.value = value
        message = "Rating must be between 1 and 5"
        super().__init__(
            message,
            code=ErrorCode.INVALID_SCORE,
            errors=[FieldError("rating", message)],
        )


class RatingNotFoundError(EntityNotFoundError):
    """Rating not found."""

    def __init__(self, rating_id: object) -> None:
        self.rating_id = rating_id
        super().__init__(
            "Rating not found",
            code=ErrorCode.RATING_NOT_FOUND,
            details={"rating_id": str(rating_id)},
        )
