"""Tests for PersistenceController."""

import asyncio
import json
import logging

import pytest

from study_hub.domain.constants import FLASHCARDS_STORAGE_KEY, TASKS_STORAGE_KEY
from study_hub.domain.entities.flashcard import Flashcard
from study_hub.domain.services.flashcard_deck import FlashcardDeck, default_deck
from study_hub.domain.services.id_generator import TimestampIdGenerator
from study_hub.domain.services.task_list import TaskList
from study_hub.infrastructure.persistence import PersistenceController
from study_hub.infrastructure.snapshot import decode_flashcards, decode_tasks
from tests.conftest import (
    SETTLE_SECONDS,
    TEST_DELAY_MS,
    FailingStore,
    RecordingStore,
    wait_for_idle,
)


def make_controller(
    store: RecordingStore, id_generator: TimestampIdGenerator
) -> tuple[PersistenceController, TaskList, FlashcardDeck]:
    tasks = TaskList(id_generator=id_generator)
    deck = FlashcardDeck(default_deck(), id_generator=id_generator)
    controller = PersistenceController(store, tasks, deck, delay_ms=TEST_DELAY_MS)
    return controller, tasks, deck


class TestLoad:
    """Initial load from the store."""

    @pytest.mark.asyncio
    async def test_restores_both_collections(self, id_generator: TimestampIdGenerator) -> None:
        store = RecordingStore(
            {
                TASKS_STORAGE_KEY: '[{"id": 10, "text": "stored", "completed": true}]',
                FLASHCARDS_STORAGE_KEY: '[{"id": 20, "q": "Q", "a": "A"}]',
            }
        )
        controller, tasks, deck = make_controller(store, id_generator)

        result = await controller.load()

        assert result.tasks_loaded and result.flashcards_loaded
        assert tasks.tasks[0].text == "stored"
        assert deck.cards == (Flashcard(id=20, question="Q", answer="A"),)

    @pytest.mark.asyncio
    async def test_load_does_not_write_back(self, id_generator: TimestampIdGenerator) -> None:
        store = RecordingStore({TASKS_STORAGE_KEY: '[{"id": 1, "text": "t"}]'})
        controller, _, _ = make_controller(store, id_generator)

        await controller.load()
        await asyncio.sleep(SETTLE_SECONDS)

        assert store.writes == []

    @pytest.mark.asyncio
    async def test_empty_store_keeps_defaults(
        self, store: RecordingStore, id_generator: TimestampIdGenerator
    ) -> None:
        controller, tasks, deck = make_controller(store, id_generator)

        result = await controller.load()

        assert not result.tasks_loaded and not result.flashcards_loaded
        assert len(tasks) == 0
        assert [c.id for c in deck.cards] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_corrupt_snapshot_falls_back_to_defaults(
        self, id_generator: TimestampIdGenerator, caplog: pytest.LogCaptureFixture
    ) -> None:
        store = RecordingStore({FLASHCARDS_STORAGE_KEY: "{{not json"})
        controller, _, deck = make_controller(store, id_generator)

        with caplog.at_level(logging.WARNING):
            result = await controller.load()

        assert result.flashcards_loaded is False
        assert len(deck) == 3
        assert any("corrupt" in r.message for r in caplog.records)

    @pytest.mark.asyncio
    async def test_blank_stored_card_falls_back_to_defaults(
        self, id_generator: TimestampIdGenerator
    ) -> None:
        store = RecordingStore(
            {
                TASKS_STORAGE_KEY: '[{"id": 1, "text": "   ", "completed": false}]',
                FLASHCARDS_STORAGE_KEY: '[{"id": 20, "q": "", "a": ""}]',
            }
        )
        controller, tasks, deck = make_controller(store, id_generator)

        result = await controller.load()

        assert not result.tasks_loaded and not result.flashcards_loaded
        assert len(tasks) == 0
        assert [c.id for c in deck.cards] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_read_failure_falls_back_to_defaults(
        self, id_generator: TimestampIdGenerator
    ) -> None:
        store = FailingStore(
            {TASKS_STORAGE_KEY: '[{"id": 1, "text": "t"}]'}, fail_get=True, fail_set=False
        )
        controller, tasks, deck = make_controller(store, id_generator)

        result = await controller.load()

        assert result.tasks_loaded is False
        assert len(tasks) == 0
        assert len(deck) == 3

    @pytest.mark.asyncio
    async def test_stored_empty_deck_is_kept(self, id_generator: TimestampIdGenerator) -> None:
        store = RecordingStore({FLASHCARDS_STORAGE_KEY: "[]"})
        controller, _, deck = make_controller(store, id_generator)

        await controller.load()

        assert len(deck) == 0


class TestWrites:
    """Model changes mirrored to the store."""

    @pytest.mark.asyncio
    async def test_two_task_mutations_one_write(
        self, store: RecordingStore, id_generator: TimestampIdGenerator
    ) -> None:
        controller, tasks, _ = make_controller(store, id_generator)
        await controller.load()

        first = tasks.add_task("first")
        tasks.toggle_task(first.id)
        await wait_for_idle(controller.tasks_writer)

        writes = store.writes_for(TASKS_STORAGE_KEY)
        assert len(writes) == 1
        assert decode_tasks(writes[0]) == list(tasks.tasks)
        assert decode_tasks(writes[0])[0].completed is True

    @pytest.mark.asyncio
    async def test_collections_written_independently(
        self, store: RecordingStore, id_generator: TimestampIdGenerator
    ) -> None:
        controller, tasks, deck = make_controller(store, id_generator)
        await controller.load()

        deck.add_card("q", "a")
        await wait_for_idle(controller.tasks_writer, controller.flashcards_writer)

        assert store.writes_for(TASKS_STORAGE_KEY) == []
        assert decode_flashcards(store.writes_for(FLASHCARDS_STORAGE_KEY)[0]) == list(deck.cards)

    @pytest.mark.asyncio
    async def test_cursor_moves_are_not_persisted(
        self, store: RecordingStore, id_generator: TimestampIdGenerator
    ) -> None:
        controller, _, deck = make_controller(store, id_generator)
        await controller.load()

        deck.flip()
        deck.next_card()
        await asyncio.sleep(SETTLE_SECONDS)

        assert store.writes == []

    @pytest.mark.asyncio
    async def test_write_failure_keeps_memory(self, id_generator: TimestampIdGenerator) -> None:
        store = FailingStore(fail_set=True)
        controller, tasks, _ = make_controller(store, id_generator)
        await controller.load()

        tasks.add_task("survives")
        await wait_for_idle(controller.tasks_writer)

        assert store.set_attempts == 1
        assert [t.text for t in tasks.tasks] == ["survives"]

    @pytest.mark.asyncio
    async def test_close_flushes_and_detaches(
        self, store: RecordingStore, id_generator: TimestampIdGenerator
    ) -> None:
        controller, tasks, _ = make_controller(store, id_generator)
        await controller.load()

        tasks.add_task("flushed on close")
        await controller.close()

        assert json.loads(store.writes_for(TASKS_STORAGE_KEY)[-1])[0]["text"] == "flushed on close"
        assert len(tasks.changed) == 0
