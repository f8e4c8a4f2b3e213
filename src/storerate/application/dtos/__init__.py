"""Read models returned by queries."""

from storerate.application.dtos.dashboard_dto import (
    DashboardStatsDTO,
    ScoreCount,
    StoreOwnerStatsDTO,
)
from storerate.application.dtos.rating_dto import RatingDetailsDTO
from storerate.application.dtos.store_dto import StoreDTO
from storerate.application.dtos.user_dto import UserDTO

__all__ = [
    "DashboardStatsDTO",
    "RatingDetailsDTO",
    "ScoreCount",
    "StoreDTO",
    "StoreOwnerStatsDTO",
    "UserDTO",
]
