"""Record store wiring for the API."""
import logging
from functools import lru_cache

from pulse_core.storage import SqliteStorage
from pulse_core.store import RecordStore

from .config import get_settings
from .services.notifications import notification_queue

log = logging.getLogger(__name__)


def build_store(settings=None) -> RecordStore:
    """
    Create and load the record store backed by the configured SQLite file.
    Mutation notifications are published to the notification queue.
    """
    settings = settings or get_settings()
    log.info(f"Opening record store at {settings.db_path}")
    store = RecordStore(
        SqliteStorage(settings.db_path),
        notifier=notification_queue.notify,
    )
    return store.load(seed_defaults=settings.seed_defaults)


@lru_cache
def get_store() -> RecordStore:
    """Singleton store, used as a FastAPI dependency."""
    return build_store()
