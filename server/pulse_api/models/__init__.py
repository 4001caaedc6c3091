"""Pydantic models for API requests and responses."""
from .activity import ActivityIn, ActivityRecord
from .metric import MetricIn, MetricRecord
from .chart import ChartResponse, ChartStatsModel
from .summary import GoalProgressModel, TodaySummaryResponse
from .preferences import Preferences

__all__ = [
    "ActivityIn",
    "ActivityRecord",
    "MetricIn",
    "MetricRecord",
    "ChartResponse",
    "ChartStatsModel",
    "GoalProgressModel",
    "TodaySummaryResponse",
    "Preferences",
]
