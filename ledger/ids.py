"""Time-derived, collision-free workout ids."""

from __future__ import annotations

import time
from collections.abc import Callable


def epoch_millis() -> int:
    """Return the current time in milliseconds since the epoch."""

    return time.time_ns() // 1_000_000


class MonotonicIdGenerator:
    """Issue strictly increasing ids derived from the current time.

    Ids are epoch milliseconds, bumped past the last issued id when two
    requests land in the same millisecond or the clock steps backwards.
    """

    def __init__(self, *, floor: int | None = None, clock: Callable[[], int] | None = None) -> None:
        """Initialize the generator.

        Args:
            floor: Every issued id is strictly greater than this value
                (typically the largest id already stored).
            clock: Callable returning the current time in epoch milliseconds. Defaults
                to the system clock.
        """

        self._last = floor
        self._clock = clock or epoch_millis

    def next_id(self) -> int:
        """Return a new id greater than every id issued so far."""

        candidate = int(self._clock())
        if self._last is not None and candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate
