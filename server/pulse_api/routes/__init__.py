"""API route modules."""
from .activities import router as activities_router
from .metrics import router as metrics_router
from .charts import router as charts_router
from .summary import router as summary_router
from .data import router as data_router
from .notifications import router as notifications_router

__all__ = [
    "activities_router",
    "metrics_router",
    "charts_router",
    "summary_router",
    "data_router",
    "notifications_router",
]
