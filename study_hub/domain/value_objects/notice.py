"""Notice value object for user-facing rejection messages."""

from dataclasses import dataclass
from typing import Self

from study_hub.domain.constants import NoticeMessages
from study_hub.domain.exceptions import CommandRejectedError


@dataclass(frozen=True)
class Notice:
    """Blocking message the presentation layer shows until dismissed."""

    title: str
    message: str

    @classmethod
    def from_error(cls, error: CommandRejectedError) -> Self:
        """Build an error notice from a rejected command."""
        return cls(title=NoticeMessages.TITLE_ERROR, message=error.user_message)
