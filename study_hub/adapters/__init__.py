# Adapters layer - Concrete store implementations (SQLite, in-memory)

from .memory_store import InMemoryKeyValueStore
from .sqlite_store import SqliteKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "SqliteKeyValueStore",
]
