"""
Schedule service: queueing posts per platform and recording their status.

Nothing here publishes anything. Status changes are claims made by the user,
and any status may move to any other.
"""
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Query, Session, joinedload

from ..errors import NotFound, ValidationError
from ..logging_config import get_logger
from ..models.enums import PLATFORMS, STATUSES, STATUS_PENDING, STATUS_PUBLISHED, normalize_platform
from ..models.post import Post
from ..models.schedule import Schedule
from ..schemas.schedules import ScheduleCreate, ScheduleUpdate
from .store import commit

logger = get_logger("schedules")


def _joined(db: Session) -> Query:
    return db.query(Schedule).join(Schedule.post).options(joinedload(Schedule.post))


def _validate_status(status: str) -> str:
    if status not in STATUSES:
        raise ValidationError("Status must be pending, published, or failed", {"field": "status"})
    return status


def list_schedules(db: Session, status: Optional[str] = None) -> List[Schedule]:
    query = _joined(db)
    if status is not None:
        query = query.filter(Schedule.status == _validate_status(status))
    return query.order_by(Schedule.scheduled_time.desc()).all()


def list_schedules_by_platform(db: Session, platform: str, status: Optional[str] = None) -> List[Schedule]:
    query = _joined(db).filter(Schedule.platform == normalize_platform(platform))
    if status is not None:
        query = query.filter(Schedule.status == _validate_status(status))
    return query.order_by(Schedule.scheduled_time.desc()).all()


def get_schedule(db: Session, schedule_id: str) -> Schedule:
    schedule = _joined(db).filter(Schedule.id == schedule_id).first()
    if not schedule:
        raise NotFound("Schedule", schedule_id)
    return schedule


def create_schedule(db: Session, data: ScheduleCreate) -> Schedule:
    if not data.post_id or not data.platform or data.scheduled_time is None:
        raise ValidationError("post_id, platform, and scheduled_time are required")

    platform = normalize_platform(data.platform)
    if platform not in PLATFORMS:
        raise ValidationError("Platform must be facebook, twitter, or instagram", {"field": "platform"})

    if db.get(Post, data.post_id) is None:
        raise NotFound("Post", data.post_id)

    schedule = Schedule(
        post_id=data.post_id,
        platform=platform,
        scheduled_time=data.scheduled_time,
        status=STATUS_PENDING,
        published_at=None,
    )
    db.add(schedule)
    commit(db, schedule)
    logger.info("Schedule created", schedule_id=schedule.id, post_id=schedule.post_id, platform=platform)
    return get_schedule(db, schedule.id)


def update_schedule(db: Session, schedule_id: str, data: ScheduleUpdate) -> Schedule:
    """
    Reschedule and/or set the status.

    Moving to ``published`` stamps ``published_at``; moving away leaves it as is.
    Fields sent as null count as omitted, and an update with nothing left is rejected.
    """
    schedule = get_schedule(db, schedule_id)

    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    if not changes:
        raise ValidationError("No valid fields to update")

    if "status" in changes:
        status = _validate_status(changes["status"])
        schedule.status = status
        if status == STATUS_PUBLISHED:
            schedule.published_at = datetime.now(timezone.utc)
    if "scheduled_time" in changes:
        schedule.scheduled_time = changes["scheduled_time"]

    commit(db, schedule)
    logger.info("Schedule updated", schedule_id=schedule.id, **{k: str(v) for k, v in changes.items()})
    return schedule


def delete_schedule(db: Session, schedule_id: str) -> None:
    """Delete a schedule and, through the store, its analytics."""
    schedule = db.get(Schedule, schedule_id)
    if not schedule:
        raise NotFound("Schedule", schedule_id)
    db.delete(schedule)
    commit(db)
    logger.info("Schedule deleted", schedule_id=schedule_id)
