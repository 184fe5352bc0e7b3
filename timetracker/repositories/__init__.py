"""
Persistence adapters.

Every backend exposes the same small key-value interface (get_item, set_item,
remove_item, clear). Services depend on that interface and never on a concrete
file or database.
"""

from .storage import KeyValueStore, MemoryStorage, get_storage

__all__ = ["KeyValueStore", "MemoryStorage", "get_storage"]
