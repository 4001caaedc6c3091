"""
Input validation for new and edited records.

Runs before any mutation. Each validator returns a mapping of field name to
message; an empty mapping means the payload is valid.
"""

import math
from datetime import date
from typing import Dict, Any

from .records import (
    DURATION_MAX,
    DURATION_MIN,
    METRIC_TYPES,
    NOTES_MAX_LENGTH,
    MetricName,
)


def _validate_date(value: Any, errors: Dict[str, str]) -> None:
    if not value:
        errors["date"] = "Date is required"
        return
    text = str(value)
    try:
        canonical = date.fromisoformat(text).isoformat() == text
    except ValueError:
        canonical = False
    if not canonical:
        errors["date"] = "Date must be a valid YYYY-MM-DD date"


def _as_number(value: Any):
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # nan and inf compare False against every bound
    return number if math.isfinite(number) else None


def validate_activity(payload: Dict[str, Any]) -> Dict[str, str]:
    """Check date, duration (whole minutes, 1-1440) and notes length."""
    errors: Dict[str, str] = {}
    _validate_date(payload.get("date"), errors)

    duration = _as_number(payload.get("duration"))
    if duration is None or duration < DURATION_MIN:
        errors["duration"] = "Duration must be at least 1 minute"
    elif duration > DURATION_MAX:
        errors["duration"] = "Duration cannot exceed 24 hours (1440 minutes)"
    elif not duration.is_integer():
        errors["duration"] = "Duration must be a whole number of minutes"

    if not payload.get("type"):
        errors["type"] = "Activity type is required"

    notes = payload.get("notes")
    if notes and len(notes) > NOTES_MAX_LENGTH:
        errors["notes"] = f"Notes cannot exceed {NOTES_MAX_LENGTH} characters"

    return errors


def validate_metric(payload: Dict[str, Any]) -> Dict[str, str]:
    """Check date, metric name and the value against that metric's bounds."""
    errors: Dict[str, str] = {}
    _validate_date(payload.get("date"), errors)

    try:
        metric_type = METRIC_TYPES[MetricName(payload.get("metric"))]
    except ValueError:
        errors["metric"] = "Unknown metric"
        return errors

    value = _as_number(payload.get("value"))
    if value is None or value < metric_type.minimum:
        errors["value"] = f"Value must be at least {metric_type.minimum:g}"
    elif value > metric_type.maximum:
        errors["value"] = f"Value cannot exceed {metric_type.maximum:g}"

    return errors
