"""Chart data API routes."""
from fastapi import APIRouter, Depends, Query

from pulse_core.queries import aggregate_metrics, chart_stats
from pulse_core.records import MetricName
from pulse_core.store import RecordStore

from ..database import get_store
from ..models.chart import ChartResponse

router = APIRouter(prefix="/api/charts", tags=["Charts"])


@router.get("/{metric}", response_model=ChartResponse)
async def get_chart(
    metric: MetricName,
    days: int = Query(default=14, ge=7, le=90, description="Number of days in the window, ending today"),
    store: RecordStore = Depends(get_store),
):
    """
    Get per-day totals of one metric over the last ``days`` days.
    Days with no readings omit the metric key.
    """
    points = aggregate_metrics(store.metrics, metric, days, today=store.clock(0))
    stats = chart_stats(points, metric)
    return ChartResponse(
        metric=metric.value,
        days=days,
        points=[p.to_dict() for p in points],
        stats=stats.to_dict(),
    )
