"""Thread-safe in-memory notification queue for user-facing messages.

Mutations on the record store publish short messages here ("Activity added
successfully!", "Metric deleted", ...). The UI can poll the history or stream
new notifications via SSE.
"""
import asyncio
import logging
import threading
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import AsyncIterator

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    """Notification styles understood by the UI."""
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class Notification:
    """A single user-facing notification."""

    message: str
    level: NotificationLevel = NotificationLevel.SUCCESS
    timestamp: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "message": self.message,
            "type": self.level.value,
            "timestamp": self.timestamp.isoformat(),
        }


class NotificationQueue:
    """Thread-safe in-memory queue for notifications.

    Supports multiple SSE subscribers and keeps a history buffer so new
    connections can catch up on recent messages.
    """

    def __init__(self, max_history: int = 100):
        """Initialize the notification queue.

        Args:
            max_history: Maximum number of notifications to keep in history.
        """
        self._history: deque[Notification] = deque(maxlen=max_history)
        self._subscribers: list[tuple[asyncio.AbstractEventLoop, asyncio.Queue]] = []
        self._lock = threading.Lock()

    def publish(self, notification: Notification) -> None:
        """Publish a notification to all subscribers.

        Thread-safe. Subscribers may live on a different event loop than the publisher.
        """
        with self._lock:
            self._history.append(notification)
            subscribers = list(self._subscribers)

        logger.debug(f"[NOTIFY] {notification.level.value}: {notification.message}")
        for loop, queue in subscribers:
            loop.call_soon_threadsafe(self._deliver, queue, notification)

    def _deliver(self, queue: asyncio.Queue, notification: Notification) -> None:
        try:
            queue.put_nowait(notification)
        except asyncio.QueueFull:
            logger.warning("[NOTIFY] Subscriber queue full, dropping slow subscriber")
            with self._lock:
                self._subscribers = [s for s in self._subscribers if s[1] is not queue]

    def notify(self, message: str, level: str = "success") -> Notification:
        """Publish a plain message. Matches the record store's notifier signature."""
        notification = Notification(message=message, level=NotificationLevel(level))
        self.publish(notification)
        return notification

    async def subscribe(
        self,
        include_history: bool = False,
        history_count: int = 10
    ) -> AsyncIterator[Notification]:
        """Subscribe to notifications via async generator.

        Args:
            include_history: Whether to yield recent notifications first.
            history_count: Number of recent notifications to include.

        Yields:
            Notification objects as they arrive.
        """
        queue: asyncio.Queue[Notification] = asyncio.Queue(maxsize=100)
        entry = (asyncio.get_running_loop(), queue)

        with self._lock:
            self._subscribers.append(entry)
            if include_history and history_count > 0:
                for notification in list(self._history)[-history_count:]:
                    queue.put_nowait(notification)

        try:
            while True:
                yield await queue.get()
        finally:
            with self._lock:
                if entry in self._subscribers:
                    self._subscribers.remove(entry)

    def get_history(self, count: int = 50) -> list[Notification]:
        """Get recent notifications, newest first."""
        with self._lock:
            return list(self._history)[-count:][::-1]

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def clear_history(self) -> None:
        """Clear the notification history buffer."""
        with self._lock:
            self._history.clear()


# Global singleton instance
notification_queue = NotificationQueue()
