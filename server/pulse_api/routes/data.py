"""Data management API routes: export, clear and display preferences."""
import logging

from fastapi import APIRouter, Depends, Response

from pulse_core.export import build_export, dumps_export, export_filename
from pulse_core.records import ACTIVITY_TYPES, METRIC_TYPES
from pulse_core.store import RecordStore

from ..database import get_store
from ..models.preferences import Preferences
from ..services.notifications import notification_queue

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Data"])


@router.get("/export")
async def export_data(store: RecordStore = Depends(get_store)):
    """
    Download both collections as a JSON file named with today's date.
    """
    document = build_export(store.activities, store.metrics)
    filename = export_filename(store.clock(0))
    log.info(f"Exporting {len(document['activities'])} activities, {len(document['metrics'])} metrics")
    notification_queue.notify("Data exported successfully!")
    return Response(
        content=dumps_export(document),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.delete("/data", status_code=204)
async def clear_all_data(store: RecordStore = Depends(get_store)):
    """Delete every activity and metric. The UI asks for confirmation first."""
    store.clear_all()
    return Response(status_code=204)


@router.get("/preferences", response_model=Preferences)
async def get_preferences(store: RecordStore = Depends(get_store)):
    return Preferences(dark_mode=store.get_dark_mode())


@router.put("/preferences", response_model=Preferences)
async def update_preferences(preferences: Preferences, store: RecordStore = Depends(get_store)):
    """Persist the dark mode flag."""
    return Preferences(dark_mode=store.set_dark_mode(preferences.dark_mode))


@router.get("/catalog")
async def get_catalog():
    """Form options: known activity types and each metric's label, unit, goal and bounds."""
    return {
        "activityTypes": ACTIVITY_TYPES,
        "metrics": [
            {
                "value": m.name.value,
                "label": m.label,
                "unit": m.unit,
                "goal": m.goal,
                "min": m.minimum,
                "max": m.maximum,
                "step": m.step,
            }
            for m in METRIC_TYPES.values()
        ],
    }
