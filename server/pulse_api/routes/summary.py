"""Today's summary and dashboard API routes."""
from fastapi import APIRouter, Depends, Query

from pulse_core.queries import todays_summary
from pulse_core.records import MetricName
from pulse_core.store import RecordStore
from pulse_core.views import ViewState, recompute

from ..database import get_store
from ..models.summary import TodaySummaryResponse

router = APIRouter(prefix="/api", tags=["Summary"])


def _summary_response(summary) -> TodaySummaryResponse:
    return TodaySummaryResponse(
        date=summary.date,
        totals=summary.totals,
        goals=[g.to_dict() for g in summary.goal_progress()],
        recent_activities=[a.to_dict() for a in summary.recent_activities],
    )


@router.get("/summary", response_model=TodaySummaryResponse, response_model_by_alias=True)
async def get_today_summary(store: RecordStore = Depends(get_store)):
    """
    Get today's totals per metric, progress toward daily goals
    and the five most recent activities.
    """
    summary = todays_summary(store.metrics, store.activities, today=store.clock(0))
    return _summary_response(summary)


@router.get("/dashboard")
async def get_dashboard(
    metric: MetricName = Query(default=MetricName.STEPS, description="Metric shown in the chart"),
    type: str = Query(default="all", description='Activity type filter, or "all"'),
    search: str = Query(default="", description="Activity search text"),
    activity_sort: str = Query(default="date-desc"),
    metric_sort: str = Query(default="date-desc"),
    days: int = Query(default=14, description="Chart window; clamped to 7-90 days"),
    store: RecordStore = Depends(get_store),
):
    """
    Get every dashboard view in one response, derived from a single
    snapshot of the store.
    """
    state = ViewState(
        selected_metric=metric,
        activity_filter=type,
        search=search,
        activity_sort=activity_sort,
        metric_sort=metric_sort,
        range_days=days,
    )
    views = recompute(state, store)
    return {
        "rangeDays": state.range_days,
        "activityTypes": views.activity_types,
        "activities": [a.to_dict() for a in views.activities],
        "metrics": [m.to_dict() for m in views.metrics],
        "chart": [p.to_dict() for p in views.chart],
        "chartStats": views.chart_stats.to_dict(),
        "summary": _summary_response(views.summary).model_dump(by_alias=True),
    }
