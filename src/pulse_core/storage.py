"""
Key-value persistence for the record store.

Values are JSON-serialized under fixed string keys. Both reads and writes are
best-effort: failures are logged and masked (fallback on read, dropped on
write) so the in-memory state stays authoritative for the session.
"""

import json
import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

logger = logging.getLogger(__name__)

# Storage keys
ACTIVITIES_KEY = "ucen_activities"
METRICS_KEY = "ucen_metrics"
DARK_MODE_KEY = "ucen_darkMode"


class KeyValueStorage:
    """
    Base persistence collaborator.

    Subclasses provide raw string access via ``_read``/``_write``; this class
    handles JSON encoding and masks every failure.
    """

    def load(self, key: str, fallback: Any = None) -> Any:
        """Load and decode the value stored under ``key``, or ``fallback``."""
        try:
            raw = self._read(key)
            if not raw:
                return fallback
            return json.loads(raw)
        except (sqlite3.Error, OSError, ValueError) as e:
            logger.warning(f"[STORAGE] Failed to load {key}: {e}")
            return fallback

    def save(self, key: str, value: Any) -> bool:
        """Encode and store ``value`` under ``key``. Returns False if the write was dropped."""
        try:
            self._write(key, json.dumps(value))
            return True
        except (sqlite3.Error, OSError, TypeError, ValueError) as e:
            logger.warning(f"[STORAGE] Failed to save {key}: {e}")
            return False

    def _read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _write(self, key: str, raw: str) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    """Process-local storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def _read(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def _write(self, key: str, raw: str) -> None:
        self.data[key] = raw


class SqliteStorage(KeyValueStorage):
    """
    SQLite-backed key-value storage.

    Uses a single ``kv`` table and opens a short-lived connection per call,
    so the store can be shared with the API's worker threads.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._lock = threading.Lock()
        self._initialized = False

    @contextmanager
    def _connect(self) -> Generator[sqlite3.Connection, None, None]:
        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        try:
            if not self._initialized:
                conn.execute("CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT)")
                self._initialized = True
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _read(self, key: str) -> Optional[str]:
        with self._lock, self._connect() as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def _write(self, key: str, raw: str) -> None:
        with self._lock, self._connect() as conn:
            conn.execute(
                "INSERT INTO kv (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, raw),
            )
        logger.debug(f"[STORAGE] Saved {key} ({len(raw)} bytes)")
