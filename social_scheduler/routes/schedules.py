"""
Schedule routes: queue posts per platform and record their status.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from ..database import get_db
from ..schemas.schedules import ScheduleCreate, ScheduleUpdate
from ..services import schedules as schedule_service
from .serializers import schedule_to_dict

router = APIRouter(prefix="/api/schedules", tags=["schedules"])


@router.get("", response_model=List[dict])
def get_schedules(
    status: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Get all schedules with their post, latest scheduled time first."""
    return [schedule_to_dict(s) for s in schedule_service.list_schedules(db, status=status)]


@router.get("/platform/{platform}", response_model=List[dict])
def get_schedules_by_platform(
    platform: str,
    status: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Get schedules for one platform (case-insensitive)."""
    schedules = schedule_service.list_schedules_by_platform(db, platform, status=status)
    return [schedule_to_dict(s) for s in schedules]


@router.get("/{schedule_id}", response_model=dict)
def get_schedule(schedule_id: str, db: Session = Depends(get_db)):
    return schedule_to_dict(schedule_service.get_schedule(db, schedule_id))


@router.post("", response_model=dict, status_code=201)
def create_schedule(schedule_data: ScheduleCreate, db: Session = Depends(get_db)):
    """Schedule an existing post on a platform. New schedules start as pending."""
    return schedule_to_dict(schedule_service.create_schedule(db, schedule_data))


@router.put("/{schedule_id}", response_model=dict)
def update_schedule(schedule_id: str, update: ScheduleUpdate, db: Session = Depends(get_db)):
    """Change the scheduled time and/or status."""
    return schedule_to_dict(schedule_service.update_schedule(db, schedule_id, update))


@router.delete("/{schedule_id}")
def delete_schedule(schedule_id: str, db: Session = Depends(get_db)):
    schedule_service.delete_schedule(db, schedule_id)
    return {"message": "Schedule deleted successfully"}
