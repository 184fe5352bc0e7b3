"""Key-value storage interface and backend selection."""
from __future__ import annotations

from typing import Dict, Optional, Protocol

from timetracker.core.config import Settings, get_settings


class KeyValueStore(Protocol):
    """String keys to string values, with whole-value writes only."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...


class MemoryStorage:
    """Process-local storage; nothing survives the interpreter."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


def get_storage(settings: Settings | None = None) -> KeyValueStore:
    """Build the backend named by TIMETRACKER_STORAGE."""
    settings = settings or get_settings()
    backend = settings.storage_backend
    if backend == "memory":
        return MemoryStorage()
    if backend == "sql":
        if settings.database_url:
            from .sql_repository import SQLStorage

            return SQLStorage()
        print("[storage] TIMETRACKER_DATABASE_URL ausente; usando arquivo JSON.")
    from .json_storage import JSONFileStorage

    return JSONFileStorage(settings.data_file)
