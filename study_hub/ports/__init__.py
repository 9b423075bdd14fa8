# Ports layer - Abstract interfaces (Protocols)

from .key_value_store import KeyValueStore, StoreError

__all__ = [
    "KeyValueStore",
    "StoreError",
]
