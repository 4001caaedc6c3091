"""Metric request/response models."""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class MetricIn(BaseModel):
    """Metric form submission. Range checks happen in pulse_core.validation."""

    date: Optional[str] = None
    metric: Optional[str] = None
    value: int | float | None = None


class MetricRecord(BaseModel):
    """Stored metric reading."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    date: str
    metric: str
    value: int | float
