"""Timestamp-based identifier generator."""

import time
from collections.abc import Callable, Iterable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TimestampIdGenerator:
    """Issues creation-timestamp ids that are unique and strictly increasing.

    Ids are the current wall clock in milliseconds. Two ids requested in the
    same millisecond, or after the clock went backwards, are bumped past the
    last one issued.
    """

    def __init__(self, clock: Callable[[], int] = _now_ms):
        """Initialize generator.

        Args:
            clock: Returns the current time in integer milliseconds
        """
        self._clock = clock
        self._last = 0

    def next_id(self) -> int:
        """Get a fresh id."""
        self._last = max(self._clock(), self._last + 1)
        return self._last

    def observe(self, existing_ids: Iterable[int]) -> None:
        """Make sure future ids are greater than ids already in use."""
        self._last = max([self._last, *existing_ids])
