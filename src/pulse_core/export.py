"""On-demand JSON snapshot of both record collections."""

import json
from datetime import datetime, timezone
from typing import Iterable, Optional

from .records import Activity, Metric

EXPORT_VERSION = "1.0"


def build_export(
    activities: Iterable[Activity],
    metrics: Iterable[Metric],
    now: Optional[datetime] = None,
) -> dict:
    """Assemble the export document: both collections, a timestamp and a version tag."""
    now = now or datetime.now(timezone.utc)
    return {
        "activities": [a.to_dict() for a in activities],
        "metrics": [m.to_dict() for m in metrics],
        "exportDate": now.isoformat(),
        "version": EXPORT_VERSION,
    }


def export_filename(today: str) -> str:
    return f"ucenpulse-data-{today}.json"


def dumps_export(document: dict) -> str:
    return json.dumps(document, indent=2)
