"""
AnalyticsRecord model: engagement counters recorded against a schedule.
"""
import uuid
from sqlalchemy import Column, String, DateTime, Integer, Float, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base
from .enums import PLATFORM_CHECK

COUNTERS = ("likes", "shares", "comments", "views", "clicks")


def compute_engagement_rate(likes: int, shares: int, comments: int, views: int) -> float:
    """Interactions per view as a percentage; zero when nothing was viewed."""
    if not views or views <= 0:
        return 0.0
    return ((likes + shares + comments) / views) * 100


class AnalyticsRecord(Base):
    __tablename__ = "analytics"
    __table_args__ = (
        CheckConstraint(PLATFORM_CHECK, name="ck_analytics_platform"),
        *(CheckConstraint(f"{name} >= 0", name=f"ck_analytics_{name}_non_negative") for name in COUNTERS),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    schedule_id = Column(String(36), ForeignKey("schedules.id", ondelete="CASCADE"), nullable=False, index=True)
    platform = Column(String(20), nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    shares = Column(Integer, nullable=False, default=0)
    comments = Column(Integer, nullable=False, default=0)
    views = Column(Integer, nullable=False, default=0)
    clicks = Column(Integer, nullable=False, default=0)
    engagement_rate = Column(Float, nullable=False, default=0.0)
    recorded_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    # Relationships
    schedule = relationship("Schedule", back_populates="analytics")

    def recompute_engagement_rate(self) -> float:
        self.engagement_rate = compute_engagement_rate(self.likes, self.shares, self.comments, self.views)
        return self.engagement_rate
