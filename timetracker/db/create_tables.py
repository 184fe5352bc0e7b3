"""Utility script to create the storage schema."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .session import get_engine, init_schema


if __name__ == "__main__":
    try:
        init_schema()
        print(f"Storage tables ready on {get_engine().url.render_as_string(hide_password=True)}.")
    except (RuntimeError, SQLAlchemyError) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
