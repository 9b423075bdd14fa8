"""Flashcard deck model: cards, viewing cursor and card management."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from study_hub.domain.constants import DEFAULT_FLASHCARDS, MIN_DECK_SIZE, NoticeMessages
from study_hub.domain.entities.flashcard import Flashcard
from study_hub.domain.exceptions import InvariantViolation, ValidationError
from study_hub.domain.services.change_notifier import ChangeNotifier
from study_hub.domain.services.id_generator import TimestampIdGenerator
from study_hub.domain.value_objects.card_face import CardFace
from study_hub.domain.value_objects.deck_cursor import DeckCursor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeckView:
    """What the flashcard widget should display right now."""

    card: Flashcard | None
    face: CardFace
    position: int  # 1-based, 0 when empty
    total: int

    @property
    def is_empty(self) -> bool:
        """Whether there is no card to show."""
        return self.card is None

    @property
    def text(self) -> str:
        """Text of the displayed face ("" when empty)."""
        return self.card.text_for(self.face) if self.card else ""

    @property
    def counter_label(self) -> str:
        """Position label such as 'Card 2 / 3'."""
        return NoticeMessages.card_position(self.position, self.total)


def default_deck() -> list[Flashcard]:
    """Get the seed cards used when nothing is stored yet."""
    return [Flashcard(id=i, question=q, answer=a) for i, q, a in DEFAULT_FLASHCARDS]


def _clean_fields(question: str, answer: str) -> tuple[str, str]:
    """Trim card fields, rejecting blanks."""
    question = question.strip()
    answer = answer.strip()
    if not question or not answer:
        raise ValidationError("question and answer are required", NoticeMessages.EMPTY_CARD_FIELDS)
    return question, answer


class FlashcardDeck:
    """In-memory flashcard collection with a viewing cursor.

    Responsibilities:
    - Card add/edit/delete with field validation
    - Minimum deck size enforcement on delete
    - Cursor movement (flip, next) and clamping

    Two channels are published: ``cards_changed`` after collection
    mutations (the persisted part) and ``cursor_changed`` whenever the
    displayed card or face moves.
    """

    def __init__(
        self,
        cards: Iterable[Flashcard] = (),
        id_generator: TimestampIdGenerator | None = None,
    ):
        """Initialize deck.

        Args:
            cards: Initial cards in deck order
            id_generator: Source of new card ids (default: wall clock)
        """
        self._cards: list[Flashcard] = list(cards)
        self._cursor = DeckCursor()
        self._ids = id_generator or TimestampIdGenerator()
        self._ids.observe(c.id for c in self._cards)
        self.cards_changed: ChangeNotifier[tuple[Flashcard, ...]] = ChangeNotifier()
        self.cursor_changed: ChangeNotifier[DeckCursor] = ChangeNotifier()

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> tuple[Flashcard, ...]:
        """Snapshot of the cards in deck order."""
        return tuple(self._cards)

    @property
    def cursor(self) -> DeckCursor:
        """Current viewing position."""
        return self._cursor

    @property
    def current_card(self) -> Flashcard | None:
        """Card under the cursor, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards[self._cursor.index]

    def get(self, card_id: int) -> Flashcard | None:
        """Get card by id or None."""
        return next((c for c in self._cards if c.id == card_id), None)

    def view(self) -> DeckView:
        """Build the read model for the flashcard widget."""
        card = self.current_card
        return DeckView(
            card=card,
            face=self._cursor.face,
            position=self._cursor.index + 1 if card else 0,
            total=len(self._cards),
        )

    # --- Card management ---

    def add_card(self, question: str, answer: str) -> Flashcard:
        """Append a new card to the end of the deck.

        Args:
            question: Front text
            answer: Back text

        Returns:
            The new card

        Raises:
            ValidationError: If either field is empty after trimming
        """
        question, answer = _clean_fields(question, answer)
        was_empty = not self._cards

        card = Flashcard(id=self._ids.next_id(), question=question, answer=answer)
        self._cards.append(card)
        logger.debug(f"Added card {card.id}")
        self._publish_cards()

        if was_empty:
            self._move_cursor(DeckCursor(index=0, flipped=False))
        return card

    def edit_card(self, card_id: int, question: str, answer: str) -> None:
        """Replace the content of a card, keeping its id and position.

        Raises:
            ValidationError: If either field is empty after trimming
        """
        question, answer = _clean_fields(question, answer)
        for i, card in enumerate(self._cards):
            if card.id == card_id:
                self._cards[i] = card.with_content(question, answer)
                self._publish_cards()
                return

    def save_card(self, card_id: int | None, question: str, answer: str) -> None:
        """Submit the card editor: edit when an id is given, otherwise add."""
        if card_id is None:
            self.add_card(question, answer)
        else:
            self.edit_card(card_id, question, answer)

    def delete_card(self, card_id: int) -> None:
        """Remove a card.

        Raises:
            InvariantViolation: If the deck is already at its minimum size
        """
        if len(self._cards) <= MIN_DECK_SIZE:
            raise InvariantViolation("minimum one card required", NoticeMessages.MIN_ONE_CARD)

        remaining = [c for c in self._cards if c.id != card_id]
        if len(remaining) == len(self._cards):
            return

        self._cards = remaining
        logger.debug(f"Deleted card {card_id}")
        self._publish_cards()

        index = self._cursor.index
        if index >= len(remaining):
            index = max(0, len(remaining) - 1)
        self._move_cursor(DeckCursor(index=index, flipped=False))

    def replace_all(self, cards: Iterable[Flashcard]) -> None:
        """Swap in a whole deck (used when loading from the store)."""
        self._cards = list(cards)
        self._ids.observe(c.id for c in self._cards)
        self._publish_cards()
        self._move_cursor(self._cursor.clamp(len(self._cards)).reset_flip())

    # --- Viewing ---

    def flip(self) -> None:
        """Turn the current card over."""
        self._move_cursor(self._cursor.flip())

    def next_card(self) -> None:
        """Advance to the next card, wrapping to the first."""
        if self._cards:
            self._move_cursor(self._cursor.advance(len(self._cards)))

    def _move_cursor(self, cursor: DeckCursor) -> None:
        if cursor == self._cursor:
            return
        self._cursor = cursor
        self.cursor_changed.notify(cursor)

    def _publish_cards(self) -> None:
        self.cards_changed.notify(self.cards)
