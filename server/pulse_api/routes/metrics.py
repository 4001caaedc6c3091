"""Metric API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from pulse_core.queries import sort_metrics
from pulse_core.store import RecordStore
from pulse_core.validation import validate_metric

from ..database import get_store
from ..errors import not_found, validation_failed
from ..models.metric import MetricIn, MetricRecord

router = APIRouter(prefix="/api/metrics", tags=["Metrics"])


@router.get("", response_model=list[MetricRecord])
async def list_metrics(
    sort: str = Query(default="date-desc", description="date-desc, date-asc, value-desc, value-asc"),
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum records to return"),
    store: RecordStore = Depends(get_store),
):
    """Get all metric readings in the requested order."""
    metrics = sort_metrics(store.metrics, sort)
    if limit:
        metrics = metrics[:limit]
    return metrics


@router.get("/{metric_id}", response_model=MetricRecord)
async def get_metric(metric_id: str, store: RecordStore = Depends(get_store)):
    metric = store.get_metric(metric_id)
    if metric is None:
        raise not_found("Metric", metric_id)
    return metric


@router.post("", response_model=MetricRecord, status_code=201)
async def create_metric(payload: MetricIn, store: RecordStore = Depends(get_store)):
    """Record a metric reading. Values outside the metric's bounds are rejected."""
    data = payload.model_dump()
    errors = validate_metric(data)
    if errors:
        raise validation_failed(errors)
    return store.add_metric(data)


@router.put("/{metric_id}", response_model=MetricRecord)
async def update_metric(
    metric_id: str,
    payload: MetricIn,
    store: RecordStore = Depends(get_store),
):
    """Replace an existing metric reading in place."""
    data = payload.model_dump()
    errors = validate_metric(data)
    if errors:
        raise validation_failed(errors)
    updated = store.update_metric(metric_id, data)
    if updated is None:
        raise not_found("Metric", metric_id)
    return updated


@router.delete("/{metric_id}", status_code=204)
async def delete_metric(metric_id: str, store: RecordStore = Depends(get_store)):
    """Delete a metric reading. Unknown ids are ignored."""
    store.delete_metric(metric_id)
    return Response(status_code=204)
