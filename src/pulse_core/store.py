"""
Record Store.

Owns the activity and metric collections. Every change goes through the
mutation methods here, which write the collection through to storage and
emit a user-facing notification plus a change event for subscribers.
"""

import logging
import secrets
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .clock import Clock, today_iso
from .records import Activity, Metric
from .storage import ACTIVITIES_KEY, DARK_MODE_KEY, METRICS_KEY, KeyValueStorage

logger = logging.getLogger(__name__)

# notifier(message, level)
Notifier = Callable[[str, str], None]


@dataclass(frozen=True)
class StoreChange:
    """Change event delivered to subscribers after a mutation."""

    collection: str  # activities, metrics, all
    action: str  # added, updated, deleted, cleared
    record_id: Optional[str] = None


def generate_id() -> str:
    """Random record identifier (64 bits of entropy)."""
    return secrets.token_hex(8)


def sample_activities(clock: Clock) -> List[Activity]:
    """Starter activities shown to first-time users."""
    return [
        Activity(id="1", date=clock(0), type="Running", duration=30, notes="Morning park run"),
        Activity(id="2", date=clock(-1), type="Gym", duration=60, notes="Leg day"),
    ]


def sample_metrics(clock: Clock) -> List[Metric]:
    """Starter metrics shown to first-time users."""
    return [
        Metric(id="1", date=clock(0), metric="steps", value=8200),
        Metric(id="2", date=clock(0), metric="water", value=2),
        Metric(id="3", date=clock(0), metric="sleep", value=7),
        Metric(id="4", date=clock(-1), metric="steps", value=10234),
        Metric(id="5", date=clock(-1), metric="water", value=1.5),
    ]


class RecordStore:
    """
    Single source of truth for activities and metrics.

    Mutations are serialized with a lock because the API serves requests from
    a thread pool. Persistence is write-through and best-effort; a failed save
    is logged by the storage layer and the in-memory collections are kept.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        clock: Clock = today_iso,
        notifier: Optional[Notifier] = None,
    ):
        self.storage = storage
        self.clock = clock
        self.notifier = notifier
        self._activities: List[Activity] = []
        self._metrics: List[Metric] = []
        self._subscribers: List[Callable[[StoreChange], None]] = []
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, seed_defaults: bool = True) -> "RecordStore":
        """
        Load both collections from storage.

        Missing or malformed collections fall back to the sample data (or to
        empty collections when ``seed_defaults`` is False). Individual entries
        that cannot be parsed are skipped.
        """
        with self._lock:
            self._activities = self._load_collection(
                ACTIVITIES_KEY,
                Activity,
                sample_activities(self.clock) if seed_defaults else [],
            )
            self._metrics = self._load_collection(
                METRICS_KEY,
                Metric,
                sample_metrics(self.clock) if seed_defaults else [],
            )
        logger.info(
            f"[STORE] Loaded {len(self._activities)} activities, {len(self._metrics)} metrics"
        )
        return self

    def _load_collection(self, key: str, record_cls, fallback: list) -> list:
        raw = self.storage.load(key, None)
        if raw is None:
            return list(fallback)
        if not isinstance(raw, list):
            logger.warning(f"[STORE] Stored {key} is not a list, using defaults")
            return list(fallback)

        records = []
        for entry in raw:
            try:
                records.append(record_cls.from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"[STORE] Skipping malformed {key} entry {entry!r}: {e}")
        return records

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def activities(self) -> List[Activity]:
        """Snapshot of the activity collection."""
        with self._lock:
            return list(self._activities)

    @property
    def metrics(self) -> List[Metric]:
        """Snapshot of the metric collection."""
        with self._lock:
            return list(self._metrics)

    def get_activity(self, record_id: str) -> Optional[Activity]:
        with self._lock:
            return next((a for a in self._activities if a.id == record_id), None)

    def get_metric(self, record_id: str) -> Optional[Metric]:
        with self._lock:
            return next((m for m in self._metrics if m.id == record_id), None)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[[StoreChange], None]) -> Callable[[], None]:
        """Register a change callback. Returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _emit(self, change: StoreChange, message: str, level: str = "success") -> None:
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception as e:
                logger.error(f"[STORE] Subscriber failed on {change}: {e}")
        if self.notifier:
            self.notifier(message, level)

    def _persist_activities(self) -> None:
        self.storage.save(ACTIVITIES_KEY, [a.to_dict() for a in self._activities])

    def _persist_metrics(self) -> None:
        self.storage.save(METRICS_KEY, [m.to_dict() for m in self._metrics])

    def _new_id(self, existing: List[Any]) -> str:
        taken = {r.id for r in existing}
        record_id = generate_id()
        while record_id in taken:
            record_id = generate_id()
        return record_id

    # ------------------------------------------------------------------
    # Activities
    # ------------------------------------------------------------------

    def add_activity(self, payload: Dict[str, Any]) -> Activity:
        """Append a new activity with a fresh id. Returns the stored record."""
        with self._lock:
            activity = Activity.from_dict({**payload, "id": self._new_id(self._activities)})
            self._activities.append(activity)
            self._persist_activities()
        logger.info(f"[STORE] Added activity {activity.id} ({activity.type}, {activity.date})")
        self._emit(StoreChange("activities", "added", activity.id), "Activity added successfully!")
        return activity

    def update_activity(self, record_id: str, payload: Dict[str, Any]) -> Optional[Activity]:
        """Replace the activity with ``record_id`` in place. Returns None if it does not exist."""
        with self._lock:
            for index, current in enumerate(self._activities):
                if current.id == record_id:
                    updated = Activity.from_dict({**payload, "id": record_id})
                    self._activities[index] = updated
                    self._persist_activities()
                    break
            else:
                logger.debug(f"[STORE] No activity {record_id} to update")
                return None
        self._emit(StoreChange("activities", "updated", record_id), "Activity updated successfully!")
        return updated

    def delete_activity(self, record_id: str) -> bool:
        """Remove the activity with ``record_id``. Missing ids are a no-op."""
        with self._lock:
            remaining = [a for a in self._activities if a.id != record_id]
            if len(remaining) == len(self._activities):
                logger.debug(f"[STORE] No activity {record_id} to delete")
                return False
            self._activities = remaining
            self._persist_activities()
        self._emit(StoreChange("activities", "deleted", record_id), "Activity deleted")
        return True

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    def add_metric(self, payload: Dict[str, Any]) -> Metric:
        """Append a new metric reading with a fresh id. Returns the stored record."""
        with self._lock:
            metric = Metric.from_dict({**payload, "id": self._new_id(self._metrics)})
            self._metrics.append(metric)
            self._persist_metrics()
        logger.info(f"[STORE] Added metric {metric.id} ({metric.metric}={metric.value}, {metric.date})")
        self._emit(StoreChange("metrics", "added", metric.id), "Metric saved successfully!")
        return metric

    def update_metric(self, record_id: str, payload: Dict[str, Any]) -> Optional[Metric]:
        """Replace the metric with ``record_id`` in place. Returns None if it does not exist."""
        with self._lock:
            for index, current in enumerate(self._metrics):
                if current.id == record_id:
                    updated = Metric.from_dict({**payload, "id": record_id})
                    self._metrics[index] = updated
                    self._persist_metrics()
                    break
            else:
                logger.debug(f"[STORE] No metric {record_id} to update")
                return None
        self._emit(StoreChange("metrics", "updated", record_id), "Metric updated successfully!")
        return updated

    def delete_metric(self, record_id: str) -> bool:
        """Remove the metric with ``record_id``. Missing ids are a no-op."""
        with self._lock:
            remaining = [m for m in self._metrics if m.id != record_id]
            if len(remaining) == len(self._metrics):
                logger.debug(f"[STORE] No metric {record_id} to delete")
                return False
            self._metrics = remaining
            self._persist_metrics()
        self._emit(StoreChange("metrics", "deleted", record_id), "Metric deleted")
        return True

    # ------------------------------------------------------------------
    # Whole-store operations
    # ------------------------------------------------------------------

    def clear_all(self) -> None:
        """Drop every activity and metric."""
        with self._lock:
            self._activities = []
            self._metrics = []
            self._persist_activities()
            self._persist_metrics()
        logger.info("[STORE] Cleared all data")
        self._emit(StoreChange("all", "cleared"), "All data cleared")

    def get_dark_mode(self) -> bool:
        return bool(self.storage.load(DARK_MODE_KEY, False))

    def set_dark_mode(self, enabled: bool) -> bool:
        self.storage.save(DARK_MODE_KEY, bool(enabled))
        return bool(enabled)
