"""Key-value storage backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select

from timetracker.db.models import StorageItem
from timetracker.db.session import get_session, init_schema


class SQLStorage:
    """One row per storage key in the ``storage_items`` table."""

    def __init__(self, *, create_schema: bool = True):
        if create_schema:
            init_schema()

    def get_item(self, key: str) -> Optional[str]:
        with get_session() as session:
            item = session.get(StorageItem, key)
            return item.value if item else None

    def set_item(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        with get_session() as session:
            item = session.get(StorageItem, key)
            if not item:
                item = StorageItem(key=key, value=str(value), updated_at=now)
                session.add(item)
            else:
                item.value = str(value)
                item.updated_at = now
            session.commit()

    def remove_item(self, key: str) -> None:
        with get_session() as session:
            session.execute(delete(StorageItem).where(StorageItem.key == key))
            session.commit()

    def clear(self) -> None:
        with get_session() as session:
            session.execute(delete(StorageItem))
            session.commit()

    def keys(self) -> list[str]:
        with get_session() as session:
            return list(session.execute(select(StorageItem.key).order_by(StorageItem.key)).scalars().all())
