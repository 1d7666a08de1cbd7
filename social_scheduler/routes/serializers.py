"""
Conversions from ORM rows to JSON-ready dictionaries.
"""
from datetime import datetime, timezone
from typing import Optional

from ..models.analytics import AnalyticsRecord
from ..models.post import Post
from ..models.schedule import Schedule


def _iso(value: Optional[datetime]) -> Optional[str]:
    """Timestamps are stored as naive UTC; emit them with an explicit offset."""
    if not value:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def post_to_dict(post: Post) -> dict:
    return {
        "id": post.id,
        "content": post.content,
        "media_url": post.media_url,
        "created_at": _iso(post.created_at),
        "updated_at": _iso(post.updated_at),
    }


def schedule_to_dict(schedule: Schedule) -> dict:
    """A schedule together with its post's content and media."""
    return {
        "id": schedule.id,
        "post_id": schedule.post_id,
        "platform": schedule.platform,
        "scheduled_time": _iso(schedule.scheduled_time),
        "status": schedule.status,
        "published_at": _iso(schedule.published_at),
        "created_at": _iso(schedule.created_at),
        "content": schedule.post.content,
        "media_url": schedule.post.media_url,
    }


def analytics_to_dict(record: AnalyticsRecord, joined: bool = False) -> dict:
    data = {
        "id": record.id,
        "schedule_id": record.schedule_id,
        "platform": record.platform,
        "likes": record.likes,
        "shares": record.shares,
        "comments": record.comments,
        "views": record.views,
        "clicks": record.clicks,
        "engagement_rate": record.engagement_rate,
        "recorded_at": _iso(record.recorded_at),
    }
    if joined:
        schedule = record.schedule
        data.update({
            "platform": schedule.platform,
            "scheduled_time": _iso(schedule.scheduled_time),
            "status": schedule.status,
            "content": schedule.post.content,
        })
    return data
