"""Domain exceptions raised by the task and flashcard models.

Both are rejections of a user command: the model is left untouched and the
application layer turns them into a notice.
"""


class CommandRejectedError(Exception):
    """Base class for commands the models refuse to apply.

    Attributes:
        user_message: Text suitable for showing to the user
    """

    def __init__(self, message: str, user_message: str | None = None):
        self.user_message = user_message or message
        super().__init__(message)


class ValidationError(CommandRejectedError):
    """Raised when a required text field is empty after trimming."""

    pass


class InvariantViolation(CommandRejectedError):
    """Raised when a command would break a deck invariant."""

    pass
