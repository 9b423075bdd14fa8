"""Persistence controller: loads the collections and keeps the store in sync."""

import contextlib
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TypeVar

from study_hub.domain.constants import (
    DEFAULT_DEBOUNCE_MS,
    FLASHCARDS_STORAGE_KEY,
    TASKS_STORAGE_KEY,
)
from study_hub.domain.services.flashcard_deck import FlashcardDeck
from study_hub.domain.services.task_list import TaskList
from study_hub.infrastructure.debounced_writer import DebouncedWriter
from study_hub.infrastructure.snapshot import (
    DeserializationError,
    decode_flashcards,
    decode_tasks,
    encode_flashcards,
    encode_tasks,
)
from study_hub.ports.key_value_store import KeyValueStore, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LoadResult:
    """Which collections were restored from the store."""

    tasks_loaded: bool
    flashcards_loaded: bool


class PersistenceController:
    """Mirrors the task list and the deck to a key-value store.

    Responsibilities:
    - Initial load with writes suppressed
    - One debounced writer per collection, fed by model change events
    - Final flush on close

    Load failures (store or snapshot) are logged and leave the model with
    its defaults.
    """

    def __init__(
        self,
        store: KeyValueStore,
        task_list: TaskList,
        deck: FlashcardDeck,
        delay_ms: int = DEFAULT_DEBOUNCE_MS,
    ):
        """Initialize controller and subscribe to model changes.

        Args:
            store: Snapshot destination
            task_list: Task model to mirror
            deck: Flashcard model to mirror
            delay_ms: Debounce quiet period
        """
        self._store = store
        self._task_list = task_list
        self._deck = deck
        self.tasks_writer = DebouncedWriter(
            store, TASKS_STORAGE_KEY, lambda: encode_tasks(task_list.tasks), delay_ms
        )
        self.flashcards_writer = DebouncedWriter(
            store, FLASHCARDS_STORAGE_KEY, lambda: encode_flashcards(deck.cards), delay_ms
        )
        self._unsubscribers = [
            task_list.changed.subscribe(self.tasks_writer.schedule),
            deck.cards_changed.subscribe(self.flashcards_writer.schedule),
        ]

    @contextlib.contextmanager
    def _suppressed(self) -> Iterator[None]:
        with self.tasks_writer.suspended(), self.flashcards_writer.suspended():
            yield

    async def load(self) -> LoadResult:
        """Restore both collections from the store without writing back.

        Returns:
            LoadResult telling which snapshots were found and valid
        """
        tasks = await self._read(TASKS_STORAGE_KEY, decode_tasks)
        cards = await self._read(FLASHCARDS_STORAGE_KEY, decode_flashcards)

        with self._suppressed():
            if tasks is not None:
                self._task_list.replace_all(tasks)
            if cards is not None:
                self._deck.replace_all(cards)

        result = LoadResult(tasks_loaded=tasks is not None, flashcards_loaded=cards is not None)
        logger.info(
            f"Loaded store: tasks={len(self._task_list)} "
            f"(stored={result.tasks_loaded}), flashcards={len(self._deck)} "
            f"(stored={result.flashcards_loaded})"
        )
        return result

    async def _read(self, key: str, decode: Callable[[str], T]) -> T | None:
        """Read and decode one snapshot, or None if missing or unusable."""
        try:
            raw = await self._store.get(key)
        except StoreError as e:
            logger.warning(f"Failed to read {key}, using defaults: {e}")
            return None

        if raw is None:
            return None

        try:
            return decode(raw)
        except DeserializationError as e:
            logger.warning(f"Discarding corrupt snapshot {key}: {e}")
            return None

    async def flush(self) -> None:
        """Write pending changes immediately."""
        await self.tasks_writer.flush()
        await self.flashcards_writer.flush()

    async def close(self) -> None:
        """Flush pending writes and detach from the models."""
        await self.flush()
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
