"""
Pytest fixtures for UCENPulse tests.
"""
import sys
import pytest
from pathlib import Path

# Ensure src/ is on sys.path so tests can import pulse_core.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pulse_core.clock import FixedClock  # noqa: E402
from pulse_core.records import Activity, Metric  # noqa: E402
from pulse_core.storage import MemoryStorage  # noqa: E402
from pulse_core.store import RecordStore  # noqa: E402


TODAY = "2024-01-10"


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def clock():
    """Clock pinned to TODAY."""
    return FixedClock(TODAY)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def notifications():
    """Captures (message, level) pairs emitted by the store."""
    return []


@pytest.fixture
def store(storage, clock, notifications):
    """Empty record store with captured notifications."""
    return RecordStore(
        storage,
        clock=clock,
        notifier=lambda message, level: notifications.append((message, level)),
    ).load(seed_defaults=False)


@pytest.fixture
def activities():
    """Small activity collection spanning several days and types."""
    return [
        Activity(id="a1", date="2024-01-08", type="Running", duration=30, notes="Morning park run"),
        Activity(id="a2", date="2024-01-10", type="Gym", duration=60, notes="Leg day"),
        Activity(id="a3", date="2024-01-09", type="Yoga", duration=45, notes=None),
        Activity(id="a4", date="2024-01-10", type="Running", duration=20, notes="Intervals"),
        Activity(id="a5", date="2023-12-31", type="Cycling", duration=90, notes="New year ride"),
        Activity(id="a6", date="2024-01-05", type="Walking", duration=60, notes=""),
    ]


@pytest.fixture
def metrics():
    """Metric readings, some inside and some outside a 14-day window ending TODAY."""
    return [
        Metric(id="m1", date="2024-01-10", metric="steps", value=8200),
        Metric(id="m2", date="2024-01-10", metric="water", value=2),
        Metric(id="m3", date="2024-01-10", metric="steps", value=1800),
        Metric(id="m4", date="2024-01-09", metric="steps", value=10234),
        Metric(id="m5", date="2024-01-09", metric="water", value=1.5),
        Metric(id="m6", date="2023-12-01", metric="steps", value=4000),
        Metric(id="m7", date="2024-01-04", metric="sleep", value=7.5),
    ]


# ============================================================================
# API Fixtures
# ============================================================================


@pytest.fixture
def api_store(clock):
    """Store used by the API client, seeded with the sample data."""
    from server.pulse_api.services.notifications import notification_queue

    notification_queue.clear_history()
    return RecordStore(MemoryStorage(), clock=clock, notifier=notification_queue.notify).load()


@pytest.fixture
def client(api_store):
    """TestClient with the store dependency overridden."""
    from fastapi.testclient import TestClient
    from server.pulse_api.database import get_store
    from server.pulse_api.main import app

    app.dependency_overrides[get_store] = lambda: api_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
