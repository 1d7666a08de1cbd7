from .posts import router as posts_router
from .schedules import router as schedules_router
from .analytics import router as analytics_router
from .health import router as health_router

__all__ = [
    "posts_router",
    "schedules_router",
    "analytics_router",
    "health_router",
]
