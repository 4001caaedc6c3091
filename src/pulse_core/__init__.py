"""
UCENPulse core.

Record store, query pipeline and persistence for the single-user fitness
tracker. Independent of the HTTP layer.
"""

from .records import Activity, Metric, MetricName, METRIC_TYPES, ACTIVITY_TYPES
from .storage import KeyValueStorage, MemoryStorage, SqliteStorage
from .store import RecordStore, StoreChange
from .queries import (
    ChartPoint,
    aggregate_metrics,
    chart_stats,
    filter_activities,
    sort_metrics,
    todays_summary,
)
from .views import ViewState, DashboardViews, recompute

__all__ = [
    "Activity",
    "Metric",
    "MetricName",
    "METRIC_TYPES",
    "ACTIVITY_TYPES",
    "KeyValueStorage",
    "MemoryStorage",
    "SqliteStorage",
    "RecordStore",
    "StoreChange",
    "ChartPoint",
    "aggregate_metrics",
    "chart_stats",
    "filter_activities",
    "sort_metrics",
    "todays_summary",
    "ViewState",
    "DashboardViews",
    "recompute",
]
