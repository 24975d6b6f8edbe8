from .sales import router as sales_router
from .proposals import router as proposals_router
from .production import router as production_router
from .quality import router as quality_router
from .purchasing import router as purchasing_router
from .notifications import router as notifications_router

__all__ = [
    "sales_router",
    "proposals_router",
    "production_router",
    "quality_router",
    "purchasing_router",
    "notifications_router",
]
