"""
Configuration helpers for the time tracker.

Settings are read from environment variables once and cached; tests reset the
cache with ``get_settings.cache_clear()``.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "timetracker.json"
STORAGE_BACKENDS = {"memory", "json", "sql"}
WEEK_STARTS = {"sunday", "monday"}


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    database_url: str
    cascade_project_time_entries: bool
    week_start: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _choice(value: str | None, choices: set[str], default: str) -> str:
        normalized = (value or "").strip().lower()
        return normalized if normalized in choices else default

    data_file = (os.getenv("TIMETRACKER_DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=_choice(os.getenv("TIMETRACKER_STORAGE"), STORAGE_BACKENDS, "json"),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        database_url=(os.getenv("TIMETRACKER_DATABASE_URL") or "").strip(),
        cascade_project_time_entries=_bool(os.getenv("TIMETRACKER_CASCADE_PROJECT_ENTRIES"), False),
        week_start=_choice(os.getenv("TIMETRACKER_WEEK_START"), WEEK_STARTS, "sunday"),
    )
