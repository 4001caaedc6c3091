"""
Unit tests for the notification queue.

Usage:
    pytest tests/test_notifications.py -v
"""
import asyncio

import pytest

from server.pulse_api.services.notifications import (
    Notification,
    NotificationLevel,
    NotificationQueue,
)


class TestNotificationQueue:
    def test_history_newest_first(self):
        queue = NotificationQueue()
        queue.notify("Activity added successfully!")
        queue.notify("Metric deleted")

        assert [n.message for n in queue.get_history()] == [
            "Metric deleted",
            "Activity added successfully!",
        ]

    def test_history_is_bounded(self):
        queue = NotificationQueue(max_history=3)
        for i in range(5):
            queue.notify(f"message {i}")
        assert [n.message for n in queue.get_history()] == ["message 4", "message 3", "message 2"]

    def test_to_dict(self):
        notification = Notification(message="All data cleared", level=NotificationLevel.SUCCESS)
        data = notification.to_dict()
        assert data["message"] == "All data cleared"
        assert data["type"] == "success"
        assert "id" in data and "timestamp" in data

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            NotificationQueue().notify("x", level="shout")

    def test_clear_history(self):
        queue = NotificationQueue()
        queue.notify("x")
        queue.clear_history()
        assert queue.get_history() == []

    @pytest.mark.asyncio
    async def test_subscriber_receives_published(self):
        queue = NotificationQueue()
        queue.notify("before connect")

        stream = queue.subscribe(include_history=True, history_count=5)
        first = await asyncio.wait_for(stream.__anext__(), timeout=1)
        assert first.message == "before connect"
        assert queue.subscriber_count() == 1

        queue.notify("Metric saved successfully!")
        second = await asyncio.wait_for(stream.__anext__(), timeout=1)
        assert second.message == "Metric saved successfully!"

        await stream.aclose()
        assert queue.subscriber_count() == 0
