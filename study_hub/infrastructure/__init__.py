"""Infrastructure layer - persistence plumbing."""

from .debounced_writer import DebouncedWriter
from .persistence import LoadResult, PersistenceController
from .snapshot import (
    DeserializationError,
    FlashcardRecord,
    TaskRecord,
    decode_flashcards,
    decode_tasks,
    encode_flashcards,
    encode_tasks,
)

__all__ = [
    "DebouncedWriter",
    "DeserializationError",
    "FlashcardRecord",
    "LoadResult",
    "PersistenceController",
    "TaskRecord",
    "decode_flashcards",
    "decode_tasks",
    "encode_flashcards",
    "encode_tasks",
]
