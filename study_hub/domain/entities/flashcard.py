"""Flashcard entity representing a question/answer pair."""

from dataclasses import dataclass, replace
from typing import Self

from study_hub.domain.value_objects.card_face import CardFace


@dataclass(frozen=True)
class Flashcard:
    """Flashcard entity.

    Attributes:
        id: Unique card identifier
        question: Front side of the card
        answer: Back side of the card
    """

    id: int
    question: str
    answer: str

    def with_content(self, question: str, answer: str) -> Self:
        """Return a copy with new content and the same identity."""
        return replace(self, question=question, answer=answer)

    def text_for(self, face: CardFace) -> str:
        """Get the text printed on the given face."""
        return self.answer if face is CardFace.ANSWER else self.question
