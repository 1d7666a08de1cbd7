"""
Social Scheduler Health Check Routes
Liveness, readiness and a detailed status report
"""
import sys
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import check_connection, get_db
from ..models import AnalyticsRecord, Post, Schedule

router = APIRouter(prefix="/api/health", tags=["health"])

START_TIME = datetime.now(timezone.utc)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_uptime() -> str:
    """Get service uptime as human-readable string"""
    delta = datetime.now(timezone.utc) - START_TIME
    hours, remainder = divmod(delta.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if delta.days > 0:
        return f"{delta.days}d {hours}h {minutes}m"
    elif hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    else:
        return f"{minutes}m {seconds}s"


def check_database(db: Session) -> Dict[str, Any]:
    """Check database connectivity and row counts"""
    try:
        counts = {
            "posts": db.query(func.count(Post.id)).scalar(),
            "schedules": db.query(func.count(Schedule.id)).scalar(),
            "analytics": db.query(func.count(AnalyticsRecord.id)).scalar(),
        }
        return {"status": "healthy", "row_counts": counts}
    except Exception as e:
        return {"status": "unhealthy", "error": str(e)}


def check_system() -> Dict[str, Any]:
    """Check host resources"""
    try:
        memory = psutil.virtual_memory()
        return {
            "status": "healthy" if memory.percent < 90 else "warning",
            "cpu_percent": psutil.cpu_percent(interval=None),
            "memory_percent": memory.percent,
            "memory_available_gb": round(memory.available / (1024**3), 2),
            "python_version": sys.version.split()[0],
        }
    except Exception as e:
        return {"status": "unknown", "error": str(e)}


# ============================================================
# ROUTES
# ============================================================

@router.get("")
def health_check():
    """Health check endpoint for load balancers and monitoring."""
    return {"status": "OK", "message": "Social Scheduler API is running"}


@router.get("/live")
def health_live():
    """
    Liveness probe - is the service running?
    """
    return {
        "ok": True,
        "status": "alive",
        "uptime": get_uptime(),
        "timestamp": _now_iso(),
    }


@router.get("/ready")
def health_ready():
    """
    Readiness probe - can the service reach its database?
    """
    database_ok = check_connection()
    return {
        "ok": database_ok,
        "status": "ready" if database_ok else "not_ready",
        "checks": {"database": "healthy" if database_ok else "unhealthy"},
        "timestamp": _now_iso(),
    }


@router.get("/full")
def health_full(db: Session = Depends(get_db)):
    """
    Full health check - detailed status of all components.
    """
    database = check_database(db)
    system = check_system()

    statuses = [database["status"], system["status"]]
    if "unhealthy" in statuses:
        overall = "unhealthy"
    elif "warning" in statuses:
        overall = "degraded"
    else:
        overall = "healthy"

    return {
        "ok": overall == "healthy",
        "status": overall,
        "environment": get_settings().environment,
        "uptime": get_uptime(),
        "started_at": START_TIME.isoformat(),
        "checks": {
            "database": database,
            "system": system,
        },
        "timestamp": _now_iso(),
    }
