from storerate.application.queries.dashboard.dashboard_queries import (
    DashboardStatsQuery,
    StoreOwnerStatsQuery,
)

__all__ = ["DashboardStatsQuery", "StoreOwnerStatsQuery"]
