"""
Shared Domain Constants.

Central location for storage keys, timing defaults, seed content and
user-facing messages. All timing values are in milliseconds.
"""

# =============================================================================
# Storage Keys
# =============================================================================

TASKS_STORAGE_KEY = "@pixel_study_helper:tasks"
FLASHCARDS_STORAGE_KEY = "@pixel_study_helper:flashcards"


# =============================================================================
# Persistence Timing (milliseconds)
# =============================================================================

DEFAULT_DEBOUNCE_MS = 100  # Quiet period before a snapshot is written
MAX_DEBOUNCE_MS = 10000


# =============================================================================
# Deck Rules
# =============================================================================

MIN_DECK_SIZE = 1  # Deleting below this is rejected


# =============================================================================
# Seed Content
# =============================================================================

# (id, question, answer) - used when no flashcard snapshot is stored
DEFAULT_FLASHCARDS = (
    (1, "What is the powerhouse of the cell?", "The Mitochondria"),
    (2, "What does HTML stand for?", "HyperText Markup Language"),
    (3, "What is 2 + 2?", "4"),
)

DEFAULT_RESOURCE_TITLES = (
    "Study Guide",
    "Math Formulas",
    "History Notes",
    "Science Portal",
    "Pomodoro Timer",
    "Lofi Beats",
)


# =============================================================================
# Notice Messages (Single Source of Truth)
# =============================================================================


class NoticeMessages:
    """Centralized messages shown to the user when a command is rejected."""

    TITLE_ERROR = "Error"

    EMPTY_TASK = "Task cannot be empty!"
    EMPTY_CARD_FIELDS = "Both question and answer are required!"
    MIN_ONE_CARD = "You must have at least one flashcard!"

    @classmethod
    def card_position(cls, position: int, total: int) -> str:
        """Get the deck counter label (1-based position)."""
        return f"Card {position} / {total}"
