"""Port interface for the persistent key-value store."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Port for snapshot persistence.

    Abstracts the on-device storage backend (SQLite in production).
    Values are opaque serialized strings; the store never interprets them.
    """

    async def get(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored value, or None if nothing was ever written

        Raises:
            StoreError: If the backend cannot be read
        """
        ...

    async def set(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one.

        Args:
            key: Storage key
            value: Serialized snapshot

        Raises:
            StoreError: If the backend cannot be written
        """
        ...


class StoreError(Exception):
    """Raised when the store fails to read or write."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"{key}: {message}")
