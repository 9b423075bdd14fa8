"""Domain value objects - immutable objects without identity."""

from .card_face import CardFace
from .deck_cursor import DeckCursor
from .notice import Notice
from .persistence_state import PersistenceState
from .resource_link import ResourceLink, default_resources

__all__ = [
    "CardFace",
    "DeckCursor",
    "Notice",
    "PersistenceState",
    "ResourceLink",
    "default_resources",
]
