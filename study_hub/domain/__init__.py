# Domain layer - Business logic (NO external dependencies)

from .entities import Flashcard, Task
from .exceptions import CommandRejectedError, InvariantViolation, ValidationError
from .value_objects import (
    CardFace,
    DeckCursor,
    Notice,
    PersistenceState,
    ResourceLink,
)

__all__ = [
    "CardFace",
    "CommandRejectedError",
    "DeckCursor",
    "Flashcard",
    "InvariantViolation",
    "Notice",
    "PersistenceState",
    "ResourceLink",
    "Task",
    "ValidationError",
]
