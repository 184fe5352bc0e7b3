"""
JSON file persistence adapter.

The whole file is a single object mapping storage keys to their serialized
values. It is read on every lookup and rewritten on every change, so two
processes writing at once simply overwrite each other.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional
import json

COLLECTION_KEYS = (
    "timetracker_projects",
    "timetracker_activities",
    "timetracker_time_entries",
)


def load(path: Path) -> dict:
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    return {}


def save(db: dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(db, ensure_ascii=False, indent=2), encoding="utf-8")


def db_defaults(db: dict) -> dict:
    """Fill in an empty array for every collection key missing from db."""
    for key in COLLECTION_KEYS:
        db.setdefault(key, "[]")
    return db


class JSONFileStorage:
    """Key-value storage kept in one JSON file on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _items(self) -> Dict[str, str]:
        data = load(self.path)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._items().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        db = self._items()
        db[key] = str(value)
        save(db, self.path)

    def remove_item(self, key: str) -> None:
        db = self._items()
        if key in db:
            del db[key]
            save(db, self.path)

    def clear(self) -> None:
        save({}, self.path)
