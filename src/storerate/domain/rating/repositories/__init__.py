from storerate.domain.rating.repositories.rating_repository import RatingRepository

__all__ = ["RatingRepository"]
