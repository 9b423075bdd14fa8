"""In-memory key-value store adapter for development and testing.

Use STUDY_HUB_STORE=memory to enable. Nothing survives a restart.
"""


class InMemoryKeyValueStore:
    """KeyValueStore implementation holding values in a dict.

    This adapter is useful for:
    - Development without touching the disk
    - Tests that inspect what was written
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self.write_count = 0

    async def get(self, key: str) -> str | None:
        """Read the value stored under a key."""
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one."""
        self._values[key] = value
        self.write_count += 1

    def snapshot(self) -> dict[str, str]:
        """Copy of everything stored."""
        return dict(self._values)

    def close(self) -> None:
        """No-op cleanup."""
        pass
