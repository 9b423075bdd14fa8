"""SQLite-based key-value store for collection snapshots.

Persists one row per storage key. Uses async-safe operations: every call
takes an asyncio.Lock and runs the blocking sqlite3 work in a thread.
"""

import asyncio
import contextlib
import logging
import sqlite3
from datetime import UTC, datetime
from pathlib import Path

from study_hub.ports.key_value_store import StoreError

logger = logging.getLogger(__name__)


class SqliteKeyValueStore:
    """KeyValueStore implementation backed by a local SQLite file.

    Connections are short-lived per operation and closed when it ends, so
    the store holds no open handle between calls.
    """

    def __init__(self, db_path: str = "store.db"):
        """Initialize store.

        Args:
            db_path: Path to SQLite database file

        The table is created lazily on first use (see initialize()).
        """
        self._db_path = Path(db_path)
        self._lock = asyncio.Lock()
        self._initialized = False

    @property
    def db_path(self) -> Path:
        """Location of the database file."""
        return self._db_path

    async def initialize(self) -> None:
        """Create the parent directory and schema (async-safe).

        Raises:
            StoreError: If the database cannot be created
        """
        async with self._lock:
            await self._ensure_initialized()

    async def _ensure_initialized(self) -> None:
        """Create the schema once; caller holds the lock."""
        if self._initialized:
            return
        try:
            await asyncio.to_thread(self._init_db)
        except (sqlite3.Error, OSError) as e:
            raise StoreError("*", f"cannot open {self._db_path}: {e}") from e
        self._initialized = True

    def _connect(self) -> sqlite3.Connection:
        """Create SQLite connection.

        Note: journal_mode=WAL persists to database file.
        """
        conn = sqlite3.connect(self._db_path)
        conn.execute("PRAGMA synchronous=NORMAL")
        return conn

    def _init_db(self) -> None:
        """Initialize database schema."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        with contextlib.closing(self._connect()) as conn, conn:
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """
            )
        logger.info(f"SQLite store ready at {self._db_path}")

    async def get(self, key: str) -> str | None:
        """Read the value stored under a key."""
        async with self._lock:
            await self._ensure_initialized()
            try:
                return await asyncio.to_thread(self._get_sync, key)
            except sqlite3.Error as e:
                raise StoreError(key, f"read failed: {e}") from e

    def _get_sync(self, key: str) -> str | None:
        """Synchronous get implementation."""
        with contextlib.closing(self._connect()) as conn, conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
            return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one."""
        async with self._lock:
            await self._ensure_initialized()
            try:
                await asyncio.to_thread(self._set_sync, key, value)
            except sqlite3.Error as e:
                raise StoreError(key, f"write failed: {e}") from e

    def _set_sync(self, key: str, value: str) -> None:
        """Synchronous upsert implementation."""
        with contextlib.closing(self._connect()) as conn, conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value, datetime.now(UTC).isoformat()),
            )

    def close(self) -> None:
        """Close the store.

        No-op since connections are short-lived per operation.
        Provided for API consistency with cleanup code.
        """
        pass
