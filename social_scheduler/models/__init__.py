from .post import Post
from .schedule import Schedule
from .analytics import AnalyticsRecord

__all__ = [
    "Post",
    "Schedule",
    "AnalyticsRecord",
]
