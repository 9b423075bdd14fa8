"""Domain services - state models and their helpers."""

from .change_notifier import ChangeNotifier
from .flashcard_deck import DeckView, FlashcardDeck, default_deck
from .id_generator import TimestampIdGenerator
from .task_list import TaskList

__all__ = [
    "ChangeNotifier",
    "DeckView",
    "FlashcardDeck",
    "TaskList",
    "TimestampIdGenerator",
    "default_deck",
]
