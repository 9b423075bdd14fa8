"""Persistence state value object for the debounced writer."""

from enum import StrEnum


class PersistenceState(StrEnum):
    """Write lifecycle of one persisted collection.

    State machine:
        IDLE -> (mutation) -> PENDING_WRITE -> (timer fires) -> WRITING -> IDLE
                                    ^                              |
                                    +------- (mutation) -----------+

    States:
        IDLE: Store matches memory as far as the writer knows
        PENDING_WRITE: Debounce timer armed, no write in flight
        WRITING: A snapshot write is in flight (a timer may also be armed)
    """

    IDLE = "idle"
    PENDING_WRITE = "pending_write"
    WRITING = "writing"
