"""Chart data models."""
from pydantic import BaseModel


class ChartStatsModel(BaseModel):
    """Average, peak and total over the non-zero days of the window."""

    average: float
    peak: float
    total: float


class ChartResponse(BaseModel):
    """Per-day buckets for one metric. Days without records omit the metric key."""

    metric: str
    days: int
    points: list[dict[str, str | int | float]]
    stats: ChartStatsModel
