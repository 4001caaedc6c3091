"""Activity request/response models."""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class ActivityIn(BaseModel):
    """Activity form submission. Range checks happen in pulse_core.validation."""

    date: Optional[str] = None
    type: Optional[str] = None
    duration: int | float | None = None
    notes: Optional[str] = None


class ActivityRecord(BaseModel):
    """Stored activity."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    date: str
    type: str
    duration: int | float
    notes: Optional[str] = None
