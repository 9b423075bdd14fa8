"""Domain entities - objects with identity."""

from .flashcard import Flashcard
from .task import Task

__all__ = ["Flashcard", "Task"]
