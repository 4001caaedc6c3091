"""
Derived dashboard views.

``recompute`` rebuilds every view from the current UI selections and store
contents. It is cheap and pure, so callers simply run it after each mutation
(or on every read).
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional

from .queries import (
    DEFAULT_RANGE_DAYS,
    ChartPoint,
    ChartStats,
    TodaySummary,
    activity_types,
    aggregate_metrics,
    chart_stats,
    clamp_range_days,
    filter_activities,
    sort_metrics,
    todays_summary,
)
from .records import Activity, Metric, MetricName
from .store import Notifier, RecordStore


@dataclass
class ViewState:
    """UI selections that drive the derived views."""

    selected_metric: MetricName = MetricName.STEPS
    activity_filter: str = "all"
    search: str = ""
    activity_sort: str = "date-desc"
    metric_sort: str = "date-desc"
    range_days: int = DEFAULT_RANGE_DAYS

    def __post_init__(self):
        self.selected_metric = MetricName(self.selected_metric)
        self.range_days = clamp_range_days(self.range_days)


@dataclass
class DashboardViews:
    """Everything the dashboard renders, derived from one store snapshot."""

    activity_types: List[str] = field(default_factory=list)
    activities: List[Activity] = field(default_factory=list)
    metrics: List[Metric] = field(default_factory=list)
    chart: List[ChartPoint] = field(default_factory=list)
    chart_stats: ChartStats = field(default_factory=ChartStats)
    summary: Optional[TodaySummary] = None


def recompute(state: ViewState, store: RecordStore, today: Optional[str] = None) -> DashboardViews:
    activities = store.activities
    metrics = store.metrics
    today = today or store.clock(0)

    chart = aggregate_metrics(metrics, state.selected_metric, state.range_days, today=today)
    return DashboardViews(
        activity_types=activity_types(activities),
        activities=filter_activities(
            activities, state.activity_filter, state.search, state.activity_sort
        ),
        metrics=sort_metrics(metrics, state.metric_sort),
        chart=chart,
        chart_stats=chart_stats(chart, state.selected_metric),
        summary=todays_summary(metrics, activities, today=today),
    )


def reset_range(state: ViewState, notifier: Optional[Notifier] = None) -> ViewState:
    """Return ``state`` with the chart window back at the default length.

    ``notifier`` (same signature as the record store's) is told about the reset.
    """
    reset = replace(state, range_days=DEFAULT_RANGE_DAYS)
    if notifier:
        notifier(f"Date range reset to {DEFAULT_RANGE_DAYS} days", "success")
    return reset
