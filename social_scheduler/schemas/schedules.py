from pydantic import BaseModel, field_validator
from datetime import datetime, timezone
from typing import Optional


def to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Store every timestamp as naive UTC; a missing offset is read as UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class ScheduleCreate(BaseModel):
    post_id: Optional[str] = None
    platform: Optional[str] = None
    scheduled_time: Optional[datetime] = None

    @field_validator("scheduled_time")
    @classmethod
    def normalize_scheduled_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc_naive(value)


class ScheduleUpdate(BaseModel):
    scheduled_time: Optional[datetime] = None
    status: Optional[str] = None

    @field_validator("scheduled_time")
    @classmethod
    def normalize_scheduled_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc_naive(value)
