"""Trailing-edge debounced snapshot writer for one storage key."""

import asyncio
import contextlib
import logging
from collections.abc import Callable, Iterator

from study_hub.domain.constants import DEFAULT_DEBOUNCE_MS
from study_hub.domain.value_objects.persistence_state import PersistenceState
from study_hub.ports.key_value_store import KeyValueStore, StoreError

logger = logging.getLogger(__name__)


class DebouncedWriter:
    """Coalesces bursts of changes into a single snapshot write.

    Every schedule() call (re)arms a timer; when the timer expires the
    current snapshot is produced and written in a background task. The
    snapshot is taken at write time, so the last state always wins.

    If the timer expires while a write is still in flight, one more write
    runs as soon as the in-flight one finishes. Write failures are logged
    and dropped: memory stays authoritative and nothing is retried.

    Must be driven from the event loop thread.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        snapshot: Callable[[], str],
        delay_ms: int = DEFAULT_DEBOUNCE_MS,
    ):
        """Initialize writer.

        Args:
            store: Destination store
            key: Storage key this writer owns
            snapshot: Produces the serialized value to write
            delay_ms: Quiet period before writing
        """
        self._store = store
        self._key = key
        self._snapshot = snapshot
        self._delay = delay_ms / 1000
        self._timer: asyncio.TimerHandle | None = None
        self._write_task: asyncio.Task | None = None
        self._rerun = False
        self._suspended = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def state(self) -> PersistenceState:
        """Current position in the write lifecycle."""
        if self._write_task is not None and not self._write_task.done():
            return PersistenceState.WRITING
        if self._timer is not None:
            return PersistenceState.PENDING_WRITE
        return PersistenceState.IDLE

    @contextlib.contextmanager
    def suspended(self) -> Iterator[None]:
        """Ignore schedule() calls inside the block (used during load)."""
        previous = self._suspended
        self._suspended = True
        try:
            yield
        finally:
            self._suspended = previous

    def schedule(self, *_args: object) -> None:
        """Arm (or re-arm) the debounce timer.

        Accepts and ignores positional arguments so it can be subscribed
        directly to a change notifier.
        """
        if self._suspended:
            return
        loop = asyncio.get_running_loop()
        if self._timer is not None:
            self._timer.cancel()
        self._timer = loop.call_later(self._delay, self._on_timer)

    def cancel(self) -> None:
        """Drop a pending write. An in-flight write is left to finish."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def flush(self) -> None:
        """Write any pending change now and wait for writes to settle."""
        if self._timer is not None:
            self.cancel()
            self._request_write()
        if self._write_task is not None:
            await self._write_task

    def _on_timer(self) -> None:
        self._timer = None
        self._request_write()

    def _request_write(self) -> None:
        if self.state is PersistenceState.WRITING:
            self._rerun = True
            return
        task = asyncio.create_task(self._write_loop(), name=f"persist:{self._key}")
        self._write_task = task

        def cleanup(t: asyncio.Task) -> None:
            if t.cancelled():
                logger.debug(f"Write for {self._key} was cancelled")

        task.add_done_callback(cleanup)

    async def _write_loop(self) -> None:
        while True:
            self._rerun = False
            await self._write_once()
            if not self._rerun:
                return

    async def _write_once(self) -> None:
        try:
            payload = self._snapshot()
            await self._store.set(self._key, payload)
            logger.debug(f"Persisted {self._key} ({len(payload)} bytes)")
        except StoreError as e:
            logger.warning(f"Failed to persist {self._key}: {e}")
        except Exception:
            logger.exception(f"Unexpected error persisting {self._key}")
