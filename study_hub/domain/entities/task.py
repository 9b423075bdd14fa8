"""Task entity representing a to-do item."""

from dataclasses import dataclass, replace
from typing import Self


@dataclass(frozen=True)
class Task:
    """To-do item entity.

    Attributes:
        id: Unique identifier (creation timestamp in milliseconds)
        text: Task description, never empty
        completed: Whether the task has been checked off
    """

    id: int
    text: str
    completed: bool = False

    def toggled(self) -> Self:
        """Return a copy with the completion flag flipped."""
        return replace(self, completed=not self.completed)
