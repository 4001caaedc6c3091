"""Activity API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from pulse_core.queries import activity_types, filter_activities
from pulse_core.store import RecordStore
from pulse_core.validation import validate_activity

from ..database import get_store
from ..errors import not_found, validation_failed
from ..models.activity import ActivityIn, ActivityRecord

router = APIRouter(prefix="/api/activities", tags=["Activities"])


@router.get("", response_model=list[ActivityRecord])
async def list_activities(
    type: str = Query(default="all", description='Exact activity type, or "all"'),
    search: str = Query(default="", description="Case-insensitive text in type, notes or date"),
    sort: str = Query(default="date-desc", description="date-desc, date-asc, duration-desc, duration-asc"),
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum records to return"),
    store: RecordStore = Depends(get_store),
):
    """Get activities filtered by type and search text, in the requested order."""
    activities = filter_activities(store.activities, type, search, sort)
    if limit:
        activities = activities[:limit]
    return activities


@router.get("/types", response_model=list[str])
async def list_activity_types(store: RecordStore = Depends(get_store)):
    """Options for the activity type filter: "all" plus each logged type."""
    return activity_types(store.activities)


@router.get("/{activity_id}", response_model=ActivityRecord)
async def get_activity(activity_id: str, store: RecordStore = Depends(get_store)):
    activity = store.get_activity(activity_id)
    if activity is None:
        raise not_found("Activity", activity_id)
    return activity


@router.post("", response_model=ActivityRecord, status_code=201)
async def create_activity(payload: ActivityIn, store: RecordStore = Depends(get_store)):
    """Log a new activity. Invalid submissions are rejected with field-level messages."""
    data = payload.model_dump()
    errors = validate_activity(data)
    if errors:
        raise validation_failed(errors)
    return store.add_activity(data)


@router.put("/{activity_id}", response_model=ActivityRecord)
async def update_activity(
    activity_id: str,
    payload: ActivityIn,
    store: RecordStore = Depends(get_store),
):
    """Replace an existing activity, keeping its position in the collection."""
    data = payload.model_dump()
    errors = validate_activity(data)
    if errors:
        raise validation_failed(errors)
    updated = store.update_activity(activity_id, data)
    if updated is None:
        raise not_found("Activity", activity_id)
    return updated


@router.delete("/{activity_id}", status_code=204)
async def delete_activity(activity_id: str, store: RecordStore = Depends(get_store)):
    """Delete an activity. Unknown ids are ignored."""
    store.delete_activity(activity_id)
    return Response(status_code=204)
