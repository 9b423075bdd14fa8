"""Pixel Study Hub - task list, flashcards and study resources with local storage."""

__version__ = "1.0.0"
