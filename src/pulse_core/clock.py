"""Calendar-day clock used for seeding defaults and computing "today"."""

from datetime import date, timedelta
from typing import Callable, Optional

# A clock returns the current calendar day as an ISO string, optionally offset by N days.
Clock = Callable[..., str]


def today_iso(offset_days: int = 0) -> str:
    """Return today's local date (YYYY-MM-DD), shifted by ``offset_days``."""
    return (date.today() + timedelta(days=offset_days)).isoformat()


def shift_iso(day: str, offset_days: int) -> str:
    """Shift an ISO calendar day by ``offset_days``."""
    return (date.fromisoformat(day) + timedelta(days=offset_days)).isoformat()


class FixedClock:
    """Clock pinned to one calendar day, for tests and reproducible exports."""

    def __init__(self, day: str):
        # Raises ValueError for a malformed day
        date.fromisoformat(day)
        self.day = day

    def __call__(self, offset_days: int = 0) -> str:
        return shift_iso(self.day, offset_days)

    def __repr__(self) -> str:
        return f"FixedClock({self.day!r})"


def resolve_today(today: Optional[str] = None, clock: Optional[Clock] = None) -> str:
    """Pick an explicit ``today`` if given, else ask the clock (system clock by default)."""
    if today:
        return today
    return (clock or today_iso)(0)
