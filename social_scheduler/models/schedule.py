"""
Schedule model: a post queued for one platform at a given time.
"""
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base
from .enums import PLATFORM_CHECK, STATUS_CHECK, STATUS_PENDING


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        CheckConstraint(PLATFORM_CHECK, name="ck_schedules_platform"),
        CheckConstraint(STATUS_CHECK, name="ck_schedules_status"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    platform = Column(String(20), nullable=False, index=True)  # facebook, twitter, instagram
    scheduled_time = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default=STATUS_PENDING)  # pending, published, failed
    published_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    # Relationships
    post = relationship("Post", back_populates="schedules")
    analytics = relationship(
        "AnalyticsRecord",
        back_populates="schedule",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
