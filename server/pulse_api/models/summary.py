"""Today's summary model."""
from pydantic import BaseModel, Field, ConfigDict

from .activity import ActivityRecord


class GoalProgressModel(BaseModel):
    """Progress toward one metric's daily goal."""

    metric: str
    label: str
    value: int | float
    goal: int | float
    unit: str
    percent: float


class TodaySummaryResponse(BaseModel):
    """Totals recorded today plus the most recent activities."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    totals: dict[str, int | float]
    goals: list[GoalProgressModel]
    recent_activities: list[ActivityRecord] = Field(serialization_alias="recentActivities")
