from .posts import PostCreate, PostUpdate
from .schedules import ScheduleCreate, ScheduleUpdate
from .analytics import AnalyticsCreate, AnalyticsUpdate
from .dashboard import DashboardSummary, EngagementTotals, PlatformEngagement

__all__ = [
    "PostCreate", "PostUpdate",
    "ScheduleCreate", "ScheduleUpdate",
    "AnalyticsCreate", "AnalyticsUpdate",
    "DashboardSummary", "EngagementTotals", "PlatformEngagement",
]
