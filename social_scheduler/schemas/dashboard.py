from pydantic import BaseModel
from typing import List


class StatusCount(BaseModel):
    status: str
    count: int


class PlatformCount(BaseModel):
    platform: str
    count: int


class EngagementTotals(BaseModel):
    total_likes: int = 0
    total_shares: int = 0
    total_comments: int = 0
    total_views: int = 0
    total_clicks: int = 0
    avg_engagement_rate: float = 0.0


class PlatformEngagement(EngagementTotals):
    platform: str


class DashboardSummary(BaseModel):
    total_posts: int
    total_schedules: int
    schedules_by_status: List[StatusCount]
    schedules_by_platform: List[PlatformCount]
    total_engagement: EngagementTotals
    engagement_by_platform: List[PlatformEngagement]
