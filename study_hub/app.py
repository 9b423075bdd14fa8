"""
Pixel Study Hub - Application State

Single owning context for the task list, the flashcard deck and the
resource list. The presentation layer constructs one StudyHubApp, drives it
through the command methods and subscribes to the model notifiers to redraw.
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import ParamSpec

from dotenv import load_dotenv

# Load .env from the working directory before reading configuration
load_dotenv(Path.cwd() / ".env")

from study_hub.domain.constants import DEFAULT_DEBOUNCE_MS  # noqa: E402
from study_hub.domain.exceptions import CommandRejectedError  # noqa: E402
from study_hub.domain.services.change_notifier import ChangeNotifier  # noqa: E402
from study_hub.domain.services.flashcard_deck import FlashcardDeck, default_deck  # noqa: E402
from study_hub.domain.services.id_generator import TimestampIdGenerator  # noqa: E402
from study_hub.domain.services.task_list import TaskList  # noqa: E402
from study_hub.domain.value_objects.notice import Notice  # noqa: E402
from study_hub.domain.value_objects.resource_link import (  # noqa: E402
    ResourceLink,
    default_resources,
)
from study_hub.infrastructure.persistence import LoadResult, PersistenceController  # noqa: E402
from study_hub.ports.key_value_store import KeyValueStore  # noqa: E402

logger = logging.getLogger(__name__)

P = ParamSpec("P")


class StudyHubApp:
    """Application state and command surface.

    Commands never raise for user mistakes: a rejected command publishes a
    Notice on ``notices`` and returns it, leaving state untouched. Successful
    commands return None. Persistence happens in the background.
    """

    def __init__(
        self,
        store: KeyValueStore,
        delay_ms: int = DEFAULT_DEBOUNCE_MS,
        id_generator_factory: Callable[[], TimestampIdGenerator] = TimestampIdGenerator,
    ):
        """Initialize application state with default content.

        Args:
            store: Persistent key-value store
            delay_ms: Debounce delay for snapshot writes
            id_generator_factory: Builds the id source for each collection
        """
        self.store = store
        self.tasks = TaskList(id_generator=id_generator_factory())
        self.deck = FlashcardDeck(default_deck(), id_generator=id_generator_factory())
        self.resources: tuple[ResourceLink, ...] = default_resources()
        self.notices: ChangeNotifier[Notice] = ChangeNotifier()
        self.persistence = PersistenceController(store, self.tasks, self.deck, delay_ms)
        self._started = False

    async def start(self) -> LoadResult:
        """Load stored collections. Call once before dispatching commands."""
        logger.info("Starting Pixel Study Hub...")
        result = await self.persistence.load()
        self._started = True
        return result

    async def close(self) -> None:
        """Flush pending writes and release the store."""
        logger.info("Shutting down Pixel Study Hub...")
        await self.persistence.close()
        close = getattr(self.store, "close", None)
        if callable(close):
            close()
        logger.info("Shutdown complete")

    # --- Task commands ---

    def add_task(self, text: str) -> Notice | None:
        return self._run(self.tasks.add_task, text)

    def toggle_task(self, task_id: int) -> Notice | None:
        return self._run(self.tasks.toggle_task, task_id)

    def delete_task(self, task_id: int) -> Notice | None:
        return self._run(self.tasks.delete_task, task_id)

    # --- Flashcard commands ---

    def add_card(self, question: str, answer: str) -> Notice | None:
        return self._run(self.deck.add_card, question, answer)

    def edit_card(self, card_id: int, question: str, answer: str) -> Notice | None:
        return self._run(self.deck.edit_card, card_id, question, answer)

    def save_card(self, card_id: int | None, question: str, answer: str) -> Notice | None:
        """Submit the card editor (add when card_id is None)."""
        return self._run(self.deck.save_card, card_id, question, answer)

    def delete_card(self, card_id: int) -> Notice | None:
        return self._run(self.deck.delete_card, card_id)

    def flip_card(self) -> Notice | None:
        return self._run(self.deck.flip)

    def next_card(self) -> Notice | None:
        return self._run(self.deck.next_card)

    def _run(
        self, command: Callable[P, object], *args: P.args, **kwargs: P.kwargs
    ) -> Notice | None:
        """Apply a model command, turning rejections into a notice."""
        if not self._started:
            logger.warning(f"{command.__name__} called before start(); store not loaded yet")
        try:
            command(*args, **kwargs)
        except CommandRejectedError as e:
            logger.info(f"Rejected {command.__name__}: {e}")
            notice = Notice.from_error(e)
            self.notices.notify(notice)
            return notice
        return None


@asynccontextmanager
async def open_app(
    store: KeyValueStore,
    delay_ms: int = DEFAULT_DEBOUNCE_MS,
) -> AsyncIterator[StudyHubApp]:
    """Lifespan manager: load on entry, flush and close on exit."""
    app = StudyHubApp(store, delay_ms=delay_ms)
    await app.start()
    try:
        yield app
    finally:
        await app.close()
