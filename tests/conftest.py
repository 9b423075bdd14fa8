"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import Callable, Iterator

import pytest

from study_hub.adapters.memory_store import InMemoryKeyValueStore
from study_hub.domain.entities.flashcard import Flashcard
from study_hub.domain.services.id_generator import TimestampIdGenerator
from study_hub.domain.value_objects.persistence_state import PersistenceState
from study_hub.infrastructure.debounced_writer import DebouncedWriter
from study_hub.ports.key_value_store import StoreError

# Short enough to keep tests quick, long enough to group synchronous mutations
TEST_DELAY_MS = 20
# Quiet period used only to show that nothing gets written
SETTLE_SECONDS = 0.15


async def wait_until(condition: Callable[[], bool], timeout: float = 5.0) -> None:
    """Poll the event loop until condition() holds.

    Raises:
        TimeoutError: If the condition is still false after timeout seconds
    """
    async with asyncio.timeout(timeout):
        while not condition():
            await asyncio.sleep(0.005)


async def wait_for_idle(*writers: DebouncedWriter) -> None:
    """Wait until no writer has a pending or in-flight write."""
    await wait_until(lambda: all(w.state is PersistenceState.IDLE for w in writers))

class StepClock:
    """Deterministic millisecond clock advancing by one per reading."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        self.now += 1
        return self.now


class RecordingStore(InMemoryKeyValueStore):
    """In-memory store that keeps every write in order."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    async def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        await super().set(key, value)

    def writes_for(self, key: str) -> list[str]:
        return [value for k, value in self.writes if k == key]


class FailingStore(RecordingStore):
    """Store whose reads and/or writes raise StoreError."""

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        fail_get: bool = False,
        fail_set: bool = True,
    ) -> None:
        super().__init__(initial)
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.set_attempts = 0

    async def get(self, key: str) -> str | None:
        if self.fail_get:
            raise StoreError(key, "disk unavailable")
        return await super().get(key)

    async def set(self, key: str, value: str) -> None:
        self.set_attempts += 1
        if self.fail_set:
            raise StoreError(key, "disk full")
        await super().set(key, value)


@pytest.fixture
def id_generator() -> TimestampIdGenerator:
    """Id generator driven by a deterministic clock."""
    return TimestampIdGenerator(clock=StepClock())


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def sample_cards() -> list[Flashcard]:
    return [
        Flashcard(id=1, question="What is the powerhouse of the cell?", answer="The Mitochondria"),
        Flashcard(id=2, question="What does HTML stand for?", answer="HyperText Markup Language"),
        Flashcard(id=3, question="What is 2 + 2?", answer="4"),
    ]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Remove study hub settings from the environment."""
    for name in ("STUDY_HUB_STORE", "STUDY_HUB_DB_PATH", "STUDY_HUB_DEBOUNCE_MS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
