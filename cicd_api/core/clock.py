"""Process clock used for health reporting."""

import time
from datetime import datetime, timezone
from typing import Callable, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProcessClock:
    """
    Wall time and uptime for a single process lifetime.

    The start instant is taken from a monotonic source so uptime never goes
    backwards when the system clock is adjusted.

    Args:
        start: Monotonic start instant; defaults to the moment of construction
        monotonic: Monotonic time source in seconds
        wall: Callable returning the current timezone-aware datetime
    """

    def __init__(
        self,
        start: Optional[float] = None,
        monotonic: Callable[[], float] = time.monotonic,
        wall: Callable[[], datetime] = utc_now,
    ):
        self._monotonic = monotonic
        self._wall = wall
        self._start = monotonic() if start is None else start

    def now(self) -> datetime:
        """Return the current UTC datetime."""
        return self._wall().astimezone(timezone.utc)

    def uptime(self) -> float:
        """Return seconds elapsed since start, never negative."""
        return max(0.0, self._monotonic() - self._start)

    def timestamp(self) -> str:
        """Return the current time as ISO-8601 with millisecond precision."""
        return self.now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
