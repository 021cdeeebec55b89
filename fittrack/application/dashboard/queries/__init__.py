"""Dashboard queries."""

from fittrack.application.dashboard.queries.get_home_dashboard import (
    GetHomeDashboardQuery,
    GetHomeDashboardQueryHandler,
    HabitProgress,
    HomeDashboard,
)
from fittrack.application.dashboard.queries.get_progress_dashboard import (
    GetProgressDashboardQuery,
    GetProgressDashboardQueryHandler,
    ProgressDashboard,
)

__all__ = [
    "GetHomeDashboardQuery",
    "GetHomeDashboardQueryHandler",
    "HabitProgress",
    "HomeDashboard",
    "GetProgressDashboardQuery",
    "GetProgressDashboardQueryHandler",
    "ProgressDashboard",
]
