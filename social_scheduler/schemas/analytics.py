from pydantic import BaseModel, Field
from typing import Optional


class AnalyticsCounters(BaseModel):
    likes: Optional[int] = Field(default=None, ge=0)
    shares: Optional[int] = Field(default=None, ge=0)
    comments: Optional[int] = Field(default=None, ge=0)
    views: Optional[int] = Field(default=None, ge=0)
    clicks: Optional[int] = Field(default=None, ge=0)


class AnalyticsCreate(AnalyticsCounters):
    schedule_id: Optional[str] = None
    platform: Optional[str] = None


class AnalyticsUpdate(AnalyticsCounters):
    pass
