"""JSON snapshot codec for the persisted collections.

A snapshot is a JSON array of plain records. Flashcards keep the short
``q``/``a`` field names used by earlier releases of the app so existing
stores stay readable.
"""

from collections.abc import Iterable
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from study_hub.domain.entities.flashcard import Flashcard
from study_hub.domain.entities.task import Task


class DeserializationError(Exception):
    """Raised when a stored snapshot is corrupt or has the wrong shape."""

    pass


# Stored text obeys the same rule as user input: trimmed and never blank
ContentText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TaskRecord(BaseModel):
    """Stored form of a task."""

    id: int
    text: ContentText
    completed: bool = Field(default=False, strict=True)

    @classmethod
    def from_entity(cls, task: Task) -> "TaskRecord":
        return cls(id=task.id, text=task.text, completed=task.completed)

    def to_entity(self) -> Task:
        return Task(id=self.id, text=self.text, completed=self.completed)


class FlashcardRecord(BaseModel):
    """Stored form of a flashcard."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    question: ContentText = Field(alias="q")
    answer: ContentText = Field(alias="a")

    @classmethod
    def from_entity(cls, card: Flashcard) -> "FlashcardRecord":
        return cls(id=card.id, question=card.question, answer=card.answer)

    def to_entity(self) -> Flashcard:
        return Flashcard(id=self.id, question=self.question, answer=self.answer)


_TASKS = TypeAdapter(list[TaskRecord])
_FLASHCARDS = TypeAdapter(list[FlashcardRecord])


def encode_tasks(tasks: Iterable[Task]) -> str:
    """Serialize tasks to a JSON snapshot."""
    records = [TaskRecord.from_entity(t) for t in tasks]
    return _TASKS.dump_json(records).decode("utf-8")


def decode_tasks(payload: str) -> list[Task]:
    """Parse a task snapshot.

    Raises:
        DeserializationError: If the payload is not a valid task list
    """
    try:
        records = _TASKS.validate_json(payload)
    except PydanticValidationError as e:
        raise DeserializationError(f"invalid task snapshot: {e.error_count()} error(s)") from e
    return [r.to_entity() for r in records]


def encode_flashcards(cards: Iterable[Flashcard]) -> str:
    """Serialize flashcards to a JSON snapshot."""
    records = [FlashcardRecord.from_entity(c) for c in cards]
    return _FLASHCARDS.dump_json(records, by_alias=True).decode("utf-8")


def decode_flashcards(payload: str) -> list[Flashcard]:
    """Parse a flashcard snapshot.

    Raises:
        DeserializationError: If the payload is not a valid flashcard list
    """
    try:
        records = _FLASHCARDS.validate_json(payload)
    except PydanticValidationError as e:
        raise DeserializationError(
            f"invalid flashcard snapshot: {e.error_count()} error(s)"
        ) from e
    return [r.to_entity() for r in records]
