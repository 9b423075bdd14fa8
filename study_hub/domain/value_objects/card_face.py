"""Card face value object."""

from enum import StrEnum


class CardFace(StrEnum):
    """Side of a flashcard currently shown to the user."""

    QUESTION = "question"
    ANSWER = "answer"

    @classmethod
    def from_flipped(cls, flipped: bool) -> "CardFace":
        """Map the cursor flip flag to the displayed face."""
        return cls.ANSWER if flipped else cls.QUESTION
