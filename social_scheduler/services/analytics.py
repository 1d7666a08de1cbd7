"""
Analytics service: engagement counters per schedule and the dashboard summary.

The engagement rate is derived, never accepted from the caller:

    engagement_rate = (likes + shares + comments) / views * 100   (0 when views == 0)

and is recomputed from the stored counters after every create and update.
"""
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, contains_eager

from ..errors import NotFound, ValidationError
from ..logging_config import get_logger, timed
from ..models.analytics import COUNTERS, AnalyticsRecord
from ..models.enums import normalize_platform
from ..models.post import Post
from ..models.schedule import Schedule
from ..schemas.analytics import AnalyticsCreate, AnalyticsUpdate
from ..schemas.dashboard import (
    DashboardSummary,
    EngagementTotals,
    PlatformCount,
    PlatformEngagement,
    StatusCount,
)
from .store import commit

logger = get_logger("analytics")


def _joined(db: Session) -> Query:
    return (
        db.query(AnalyticsRecord)
        .join(AnalyticsRecord.schedule)
        .join(Schedule.post)
        .options(contains_eager(AnalyticsRecord.schedule).contains_eager(Schedule.post))
    )


def list_analytics(db: Session) -> List[AnalyticsRecord]:
    return _joined(db).order_by(AnalyticsRecord.recorded_at.desc()).all()


def list_analytics_by_schedule(db: Session, schedule_id: str) -> List[AnalyticsRecord]:
    return (
        _joined(db)
        .filter(AnalyticsRecord.schedule_id == schedule_id)
        .order_by(AnalyticsRecord.recorded_at.desc())
        .all()
    )


def list_analytics_by_platform(db: Session, platform: str) -> List[AnalyticsRecord]:
    return (
        _joined(db)
        .filter(Schedule.platform == normalize_platform(platform))
        .order_by(AnalyticsRecord.recorded_at.desc())
        .all()
    )


def get_analytics(db: Session, analytics_id: str) -> AnalyticsRecord:
    record = db.get(AnalyticsRecord, analytics_id)
    if not record:
        raise NotFound("Analytics record", analytics_id)
    return record


def create_analytics(db: Session, data: AnalyticsCreate) -> AnalyticsRecord:
    """
    Record counters for an existing schedule.

    The platform stored is the schedule's own; a different submitted value is
    logged and ignored. Missing counters default to 0.
    """
    if not data.schedule_id or not data.platform:
        raise ValidationError("schedule_id and platform are required")

    schedule = db.get(Schedule, data.schedule_id)
    if schedule is None:
        raise NotFound("Schedule", data.schedule_id)

    submitted = normalize_platform(data.platform)
    if submitted != schedule.platform:
        logger.warning(
            "Submitted platform differs from schedule platform",
            schedule_id=schedule.id,
            submitted=submitted,
            platform=schedule.platform,
        )

    counters = {name: getattr(data, name) or 0 for name in COUNTERS}
    record = AnalyticsRecord(schedule_id=schedule.id, platform=schedule.platform, **counters)
    record.recompute_engagement_rate()

    db.add(record)
    commit(db, record)
    logger.info(
        "Analytics recorded",
        analytics_id=record.id,
        schedule_id=schedule.id,
        engagement_rate=record.engagement_rate,
    )
    return record


def update_analytics(db: Session, analytics_id: str, data: AnalyticsUpdate) -> AnalyticsRecord:
    """Replace the counters that were sent, keep the rest, and recompute the rate."""
    record = get_analytics(db, analytics_id)

    for name in COUNTERS:
        value = getattr(data, name)
        if value is not None:
            setattr(record, name, value)
    record.recompute_engagement_rate()

    commit(db, record)
    logger.info("Analytics updated", analytics_id=record.id, engagement_rate=record.engagement_rate)
    return record


def delete_analytics(db: Session, analytics_id: str) -> None:
    record = get_analytics(db, analytics_id)
    db.delete(record)
    commit(db)
    logger.info("Analytics deleted", analytics_id=analytics_id)


# ============================================================
# DASHBOARD
# ============================================================

def _engagement_columns(table) -> List[Any]:
    return [
        func.coalesce(func.sum(table.likes), 0).label("total_likes"),
        func.coalesce(func.sum(table.shares), 0).label("total_shares"),
        func.coalesce(func.sum(table.comments), 0).label("total_comments"),
        func.coalesce(func.sum(table.views), 0).label("total_views"),
        func.coalesce(func.sum(table.clicks), 0).label("total_clicks"),
        func.coalesce(func.avg(table.engagement_rate), 0.0).label("avg_engagement_rate"),
    ]


def _totals(row) -> Dict[str, Any]:
    return {
        "total_likes": int(row.total_likes or 0),
        "total_shares": int(row.total_shares or 0),
        "total_comments": int(row.total_comments or 0),
        "total_views": int(row.total_views or 0),
        "total_clicks": int(row.total_clicks or 0),
        "avg_engagement_rate": float(row.avg_engagement_rate or 0.0),
    }


@timed(logger)
def dashboard_summary(db: Session) -> DashboardSummary:
    """Counts of posts and schedules plus engagement totals overall and per platform."""
    total_posts = db.query(func.count(Post.id)).scalar() or 0
    total_schedules = db.query(func.count(Schedule.id)).scalar() or 0

    by_status = (
        db.query(Schedule.status, func.count(Schedule.id))
        .group_by(Schedule.status)
        .order_by(Schedule.status)
        .all()
    )
    by_platform = (
        db.query(Schedule.platform, func.count(Schedule.id))
        .group_by(Schedule.platform)
        .order_by(Schedule.platform)
        .all()
    )

    totals_row = db.query(*_engagement_columns(AnalyticsRecord)).one()

    platform_rows = (
        db.query(Schedule.platform.label("platform"), *_engagement_columns(AnalyticsRecord))
        .select_from(AnalyticsRecord)
        .join(Schedule, AnalyticsRecord.schedule_id == Schedule.id)
        .group_by(Schedule.platform)
        .order_by(Schedule.platform)
        .all()
    )

    return DashboardSummary(
        total_posts=total_posts,
        total_schedules=total_schedules,
        schedules_by_status=[StatusCount(status=s, count=c) for s, c in by_status],
        schedules_by_platform=[PlatformCount(platform=p, count=c) for p, c in by_platform],
        total_engagement=EngagementTotals(**_totals(totals_row)),
        engagement_by_platform=[
            PlatformEngagement(platform=row.platform, **_totals(row)) for row in platform_rows
        ],
    )
