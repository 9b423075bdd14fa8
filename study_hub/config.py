"""Application configuration loaded from environment variables.

Provides type-safe access to configuration with sensible defaults.
"""

import logging
import os
from pathlib import Path

from study_hub.domain.constants import DEFAULT_DEBOUNCE_MS, MAX_DEBOUNCE_MS

logger = logging.getLogger(__name__)

VALID_STORE_ADAPTERS = ("sqlite", "memory")


def get_store_adapter_type() -> str:
    """Get store adapter type from environment.

    Environment variable: STUDY_HUB_STORE
    Options:
        - 'sqlite': Persist to a local SQLite file (default)
        - 'memory': Keep everything in memory (no disk access)
    """
    return os.getenv("STUDY_HUB_STORE", "sqlite").strip().lower()


def get_store_db_path() -> str:
    """Get SQLite database path from environment.

    Environment variable: STUDY_HUB_DB_PATH
    Default: ~/.pixel_study_hub/store.db
    """
    default_path = str(Path.home() / ".pixel_study_hub" / "store.db")
    return os.getenv("STUDY_HUB_DB_PATH", default_path)


def get_debounce_ms() -> int:
    """Get persistence debounce delay in milliseconds.

    Environment variable: STUDY_HUB_DEBOUNCE_MS
    Default: 100. Values are clamped to [0, 10000]; unparseable values fall
    back to the default.
    """
    raw = os.getenv("STUDY_HUB_DEBOUNCE_MS")
    if raw is None or not raw.strip():
        return DEFAULT_DEBOUNCE_MS
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid STUDY_HUB_DEBOUNCE_MS={raw!r}, using {DEFAULT_DEBOUNCE_MS}")
        return DEFAULT_DEBOUNCE_MS
    return min(max(value, 0), MAX_DEBOUNCE_MS)


def get_log_level() -> str:
    """Get root log level name.

    Environment variable: LOG_LEVEL
    Default: INFO
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL (for host processes)."""
    level = getattr(logging, get_log_level(), logging.INFO)
    logging.basicConfig(level=level)
