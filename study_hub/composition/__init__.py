"""
Composition Root.

Centralized dependency wiring for the application.
All factory functions that instantiate adapters belong here so the domain
never imports from adapters.
"""

import logging

from study_hub.adapters.memory_store import InMemoryKeyValueStore
from study_hub.adapters.sqlite_store import SqliteKeyValueStore
from study_hub.app import StudyHubApp
from study_hub.config import (
    VALID_STORE_ADAPTERS,
    get_debounce_ms,
    get_store_adapter_type,
    get_store_db_path,
)
from study_hub.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


def create_store(adapter_type: str | None = None) -> KeyValueStore:
    """Create the configured key-value store.

    Args:
        adapter_type: 'sqlite' or 'memory' (default: STUDY_HUB_STORE)

    Returns:
        Store adapter instance

    Raises:
        ValueError: If the adapter type is unknown
    """
    adapter_type = adapter_type or get_store_adapter_type()

    if adapter_type == "memory":
        logger.info("Using in-memory store (nothing is persisted)")
        return InMemoryKeyValueStore()
    if adapter_type == "sqlite":
        db_path = get_store_db_path()
        logger.info(f"Using SQLite store: {db_path}")
        return SqliteKeyValueStore(db_path)

    raise ValueError(
        f"Invalid STUDY_HUB_STORE: '{adapter_type}'. "
        f"Valid options: {', '.join(VALID_STORE_ADAPTERS)}"
    )


def create_app(store: KeyValueStore | None = None) -> StudyHubApp:
    """Create StudyHubApp wired to the configured store and delay.

    Call start() on the result before dispatching commands.
    """
    return StudyHubApp(store or create_store(), delay_ms=get_debounce_ms())
