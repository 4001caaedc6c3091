"""
Query pipeline over the record collections.

Pure functions deriving the views the dashboard renders:
- filtered/sorted activity list
- sorted metric list
- per-day chart buckets for one metric over a rolling window
- today's totals and most recent activities

None of these mutate their inputs; each returns fresh objects.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional, Dict, List, Iterable, Sequence, Union

from .clock import resolve_today
from .records import Activity, Metric, MetricName, METRIC_TYPES, to_number

logger = logging.getLogger(__name__)

DEFAULT_RANGE_DAYS = 14
MIN_RANGE_DAYS = 7
MAX_RANGE_DAYS = 90
RECENT_ACTIVITY_LIMIT = 5


def clamp_range_days(days: Optional[int]) -> int:
    """Keep a chart window inside the supported 7-90 day range."""
    if not days:
        return DEFAULT_RANGE_DAYS
    return max(MIN_RANGE_DAYS, min(MAX_RANGE_DAYS, int(days)))


# ============================================================================
# Activities
# ============================================================================


def _matches_search(activity: Activity, query: str) -> bool:
    if query in activity.type.lower():
        return True
    if activity.notes and query in activity.notes.lower():
        return True
    return query in activity.date


def filter_activities(
    activities: Iterable[Activity],
    type_filter: Optional[str] = "all",
    search: Optional[str] = "",
    sort_by: Optional[str] = "date-desc",
) -> List[Activity]:
    """
    Filter activities by type and search text, then sort them.

    Args:
        activities: Activity collection (not modified)
        type_filter: "all" or an exact activity type
        search: Case-insensitive text matched against type, notes and date
        sort_by: date-asc, date-desc, duration-asc or duration-desc.
            Unknown keys fall back to date-desc.

    Returns:
        New list of matching activities in the requested order. Ties keep
        their original relative order.
    """
    query = (search or "").lower()
    selected = []
    for activity in activities:
        if type_filter and type_filter != "all" and activity.type != type_filter:
            continue
        if query and not _matches_search(activity, query):
            continue
        selected.append(activity)

    if sort_by == "date-asc":
        return sorted(selected, key=lambda a: a.date)
    if sort_by == "duration-asc":
        return sorted(selected, key=lambda a: a.duration)
    if sort_by == "duration-desc":
        return sorted(selected, key=lambda a: a.duration, reverse=True)
    return sorted(selected, key=lambda a: a.date, reverse=True)


def activity_types(activities: Iterable[Activity]) -> List[str]:
    """Filter options: "all" followed by each distinct type in first-seen order."""
    seen = dict.fromkeys(a.type for a in activities)
    return ["all", *seen]


# ============================================================================
# Metrics
# ============================================================================


def sort_metrics(metrics: Iterable[Metric], sort_by: Optional[str] = "date-desc") -> List[Metric]:
    """Sorted copy of the metric collection. Values compare numerically."""
    if sort_by == "date-asc":
        return sorted(metrics, key=lambda m: m.date)
    if sort_by == "value-asc":
        return sorted(metrics, key=lambda m: to_number(m.value))
    if sort_by == "value-desc":
        return sorted(metrics, key=lambda m: to_number(m.value), reverse=True)
    return sorted(metrics, key=lambda m: m.date, reverse=True)


@dataclass
class ChartPoint:
    """One day's bucket in the chart window. Unset metrics mean no records that day."""

    date: str
    steps: Optional[float] = None
    water: Optional[float] = None
    sleep: Optional[float] = None
    calories: Optional[float] = None

    def get(self, metric: Union[MetricName, str]) -> Optional[float]:
        return getattr(self, MetricName(metric).value)

    def add(self, metric: MetricName, value: float) -> None:
        current = getattr(self, metric.value)
        setattr(self, metric.value, value if current is None else current + value)

    def to_dict(self) -> dict:
        """Serialize as ``{date, <metric>: value}``, omitting absent metrics."""
        result = {"date": self.date}
        for name in MetricName:
            value = getattr(self, name.value)
            if value is not None:
                result[name.value] = value
        return result


def _window_days(range_days: int, today: str) -> List[str]:
    end = date.fromisoformat(today)
    return [(end - timedelta(days=i)).isoformat() for i in range(range_days - 1, -1, -1)]


def aggregate_metrics(
    metrics: Iterable[Metric],
    metric_name: Optional[Union[MetricName, str]] = None,
    range_days: int = DEFAULT_RANGE_DAYS,
    today: Optional[str] = None,
) -> List[ChartPoint]:
    """
    Bucket metric values by day over the window ending today.

    Args:
        metrics: Metric collection
        metric_name: Only sum this metric; None sums every known metric
        range_days: Number of consecutive days in the window, today included
        today: ISO day the window ends on (defaults to the system clock)

    Returns:
        One ChartPoint per day, oldest first. Records dated outside the window
        are ignored. Same-day records for the same metric are summed.
    """
    target = MetricName(metric_name).value if metric_name else None
    buckets: Dict[str, ChartPoint] = {
        day: ChartPoint(date=day) for day in _window_days(range_days, resolve_today(today))
    }

    for m in metrics:
        if target and m.metric != target:
            continue
        bucket = buckets.get(m.date)
        if bucket is None:
            continue
        try:
            name = MetricName(m.metric)
        except ValueError:
            logger.debug(f"[QUERY] Skipping unknown metric {m.metric!r} on {m.date}")
            continue
        bucket.add(name, to_number(m.value or 0))

    return list(buckets.values())


@dataclass
class ChartStats:
    """Average, peak and total of the non-zero days in a chart window."""

    average: float = 0
    peak: float = 0
    total: float = 0

    def to_dict(self) -> dict:
        return {"average": self.average, "peak": self.peak, "total": self.total}


def chart_stats(points: Sequence[ChartPoint], metric_name: Union[MetricName, str]) -> ChartStats:
    """Summarize a chart window; days without data do not drag the average down."""
    values = [v for v in (p.get(metric_name) or 0 for p in points) if v > 0]
    if not values:
        return ChartStats()
    total = sum(values)
    return ChartStats(average=round(total / len(values), 1), peak=max(values), total=total)


# ============================================================================
# Today's summary
# ============================================================================


@dataclass
class GoalProgress:
    """Today's total for one metric against its daily goal."""

    metric: MetricName
    label: str
    value: float
    goal: float
    unit: str

    @property
    def percent(self) -> float:
        if self.goal == 0:
            return 100.0
        return min(self.value * 100 / self.goal, 100.0)

    def to_dict(self) -> dict:
        return {
            "metric": self.metric.value,
            "label": self.label,
            "value": self.value,
            "goal": self.goal,
            "unit": self.unit,
            "percent": self.percent,
        }


@dataclass
class TodaySummary:
    """Totals recorded today plus the most recent activities."""

    date: str
    totals: Dict[str, float] = field(default_factory=dict)
    recent_activities: List[Activity] = field(default_factory=list)

    def goal_progress(self) -> List[GoalProgress]:
        return goal_progress(self.totals)


def goal_progress(totals: Dict[str, float]) -> List[GoalProgress]:
    """Progress toward each metric's daily goal; missing totals count as zero."""
    return [
        GoalProgress(
            metric=metric_type.name,
            label=metric_type.label,
            value=totals.get(metric_type.name.value, 0),
            goal=metric_type.goal,
            unit=metric_type.unit,
        )
        for metric_type in METRIC_TYPES.values()
    ]


def todays_summary(
    metrics: Iterable[Metric],
    activities: Iterable[Activity],
    today: Optional[str] = None,
    recent_limit: int = RECENT_ACTIVITY_LIMIT,
) -> TodaySummary:
    """Sum today's metrics by name and pick the latest activities by date."""
    day = resolve_today(today)
    totals: Dict[str, float] = {}
    for m in metrics:
        if m.date == day:
            totals[m.metric] = totals.get(m.metric, 0) + to_number(m.value)

    recent = sorted(activities, key=lambda a: a.date, reverse=True)[:recent_limit]
    return TodaySummary(date=day, totals=totals, recent_activities=recent)
