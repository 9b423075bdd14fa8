"""Deck cursor value object."""

from dataclasses import dataclass, replace
from typing import Self

from study_hub.domain.value_objects.card_face import CardFace


@dataclass(frozen=True)
class DeckCursor:
    """Immutable pointer to the displayed flashcard and its face.

    Every transition returns a new cursor. Transitions that change the
    displayed card always come back with ``flipped`` reset to False.

    Attributes:
        index: Position in the deck (0 when the deck is empty)
        flipped: True when the answer side is showing
    """

    index: int = 0
    flipped: bool = False

    @property
    def face(self) -> CardFace:
        """Face currently displayed."""
        return CardFace.from_flipped(self.flipped)

    def flip(self) -> Self:
        """Turn the card over."""
        return replace(self, flipped=not self.flipped)

    def advance(self, deck_length: int) -> Self:
        """Move to the next card, wrapping around.

        Args:
            deck_length: Current number of cards

        Returns:
            Same cursor when the deck is empty, otherwise the next position
        """
        if deck_length <= 0:
            return self
        return type(self)(index=(self.index + 1) % deck_length, flipped=False)

    def clamp(self, deck_length: int) -> Self:
        """Pull the index back into range for a deck of the given length.

        Flip state is preserved only when the index is already valid.
        """
        upper = max(0, deck_length - 1)
        if 0 <= self.index <= upper:
            return self
        return type(self)(index=min(max(self.index, 0), upper), flipped=False)

    def reset_flip(self) -> Self:
        """Show the question side."""
        if not self.flipped:
            return self
        return replace(self, flipped=False)
