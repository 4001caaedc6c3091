"""Notification API routes.

User-facing messages produced by data changes, via history or SSE.
"""
import json

from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from ..services.notifications import notification_queue

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("/stream")
async def stream_notifications(
    include_history: bool = Query(False, description="Include recent notifications on connect"),
    history_count: int = Query(10, ge=0, le=50, description="Number of historical notifications"),
):
    """
    Stream notifications via Server-Sent Events (SSE).

    The stream never closes - clients should handle reconnection.

    Usage with curl:
        curl -N http://localhost:8082/api/notifications/stream
    """
    async def event_generator():
        async for notification in notification_queue.subscribe(
            include_history=include_history,
            history_count=history_count
        ):
            data = json.dumps(notification.to_dict())
            yield f"event: notification\ndata: {data}\n\n"

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        }
    )


@router.get("/history")
async def get_notification_history(
    count: int = Query(20, ge=1, le=100, description="Number of notifications to return")
):
    """Get recent notifications, newest first."""
    return [n.to_dict() for n in notification_queue.get_history(count)]
