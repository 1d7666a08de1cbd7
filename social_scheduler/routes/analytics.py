"""
Analytics routes: engagement counters per schedule and the dashboard summary.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..schemas.analytics import AnalyticsCreate, AnalyticsUpdate
from ..schemas.dashboard import DashboardSummary
from ..services import analytics as analytics_service
from .serializers import analytics_to_dict

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=List[dict])
def get_analytics(db: Session = Depends(get_db)):
    """Get all analytics with schedule and post details, most recent first."""
    return [analytics_to_dict(a, joined=True) for a in analytics_service.list_analytics(db)]


@router.get("/schedule/{schedule_id}", response_model=List[dict])
def get_analytics_for_schedule(schedule_id: str, db: Session = Depends(get_db)):
    records = analytics_service.list_analytics_by_schedule(db, schedule_id)
    return [analytics_to_dict(a, joined=True) for a in records]


@router.get("/platform/{platform}", response_model=List[dict])
def get_analytics_for_platform(platform: str, db: Session = Depends(get_db)):
    records = analytics_service.list_analytics_by_platform(db, platform)
    return [analytics_to_dict(a, joined=True) for a in records]


@router.get("/dashboard/summary", response_model=DashboardSummary)
def get_dashboard_summary(db: Session = Depends(get_db)):
    """Post and schedule counts plus engagement totals, overall and per platform."""
    return analytics_service.dashboard_summary(db)


@router.get("/{analytics_id}", response_model=dict)
def get_analytics_record(analytics_id: str, db: Session = Depends(get_db)):
    return analytics_to_dict(analytics_service.get_analytics(db, analytics_id))


@router.post("", response_model=dict, status_code=201)
def create_analytics(data: AnalyticsCreate, db: Session = Depends(get_db)):
    """Record engagement counters for a schedule."""
    return analytics_to_dict(analytics_service.create_analytics(db, data))


@router.put("/{analytics_id}", response_model=dict)
def update_analytics(analytics_id: str, data: AnalyticsUpdate, db: Session = Depends(get_db)):
    """Update any subset of counters; the engagement rate is recomputed."""
    return analytics_to_dict(analytics_service.update_analytics(db, analytics_id, data))


@router.delete("/{analytics_id}")
def delete_analytics(analytics_id: str, db: Session = Depends(get_db)):
    analytics_service.delete_analytics(db, analytics_id)
    return {"message": "Analytics record deleted successfully"}
