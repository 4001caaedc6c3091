"""
Record types for the fitness tracker.

Defines the two record collections the store owns:
- Activity: a logged exercise session
- Metric: a single dated health measurement (steps, water, sleep, calories)

Plus the metric type catalogue (labels, units, daily goals, input bounds).
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Dict, Any


class MetricName(str, Enum):
    """Closed set of health metrics."""

    STEPS = "steps"
    WATER = "water"
    SLEEP = "sleep"
    CALORIES = "calories"


# Known activity categories offered by the entry form. Free-form types are accepted.
ACTIVITY_TYPES = [
    "Running",
    "Cycling",
    "Gym",
    "Yoga",
    "Swimming",
    "Walking",
    "Other",
]

DURATION_MIN = 1
DURATION_MAX = 1440  # 24 hours in minutes
NOTES_MAX_LENGTH = 200


@dataclass(frozen=True)
class MetricType:
    """Display and validation settings for one metric."""

    name: MetricName
    label: str
    unit: str
    goal: float
    minimum: float
    maximum: float
    step: float


METRIC_TYPES: Dict[MetricName, MetricType] = {
    MetricName.STEPS: MetricType(MetricName.STEPS, "Steps", "", 10000, 0, 100000, 1),
    MetricName.WATER: MetricType(MetricName.WATER, "Water", "L", 2.5, 0, 20, 0.1),
    MetricName.SLEEP: MetricType(MetricName.SLEEP, "Sleep", "hrs", 8, 0, 24, 0.5),
    MetricName.CALORIES: MetricType(MetricName.CALORIES, "Calories", "", 2000, 0, 10000, 1),
}


def to_number(val: Any) -> float:
    """Coerce a form/JSON value to a number, keeping integers integral.

    Empty values become 0, matching how the UI treats blank numeric inputs.
    """
    if val is None or val == "":
        return 0
    if isinstance(val, bool):
        return int(val)
    if isinstance(val, (int, float)):
        return val
    num = float(val)
    return int(num) if num.is_integer() and "." not in str(val) else num


@dataclass
class Activity:
    """Logged exercise session."""

    id: str
    date: str
    type: str
    duration: int
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Activity":
        """Build from a stored or submitted mapping, coercing duration to a number."""
        duration = to_number(data.get("duration"))
        if isinstance(duration, float) and duration.is_integer():
            duration = int(duration)
        return cls(
            id=str(data["id"]),
            date=str(data["date"]),
            type=str(data["type"]),
            duration=duration,
            notes=data.get("notes") or None,
        )


@dataclass
class Metric:
    """Single dated health measurement."""

    id: str
    date: str
    metric: str
    value: float

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Metric":
        """Build from a stored or submitted mapping, coercing value to a number."""
        metric = data["metric"]
        if isinstance(metric, MetricName):
            metric = metric.value
        return cls(
            id=str(data["id"]),
            date=str(data["date"]),
            metric=str(metric),
            value=to_number(data.get("value")),
        )
