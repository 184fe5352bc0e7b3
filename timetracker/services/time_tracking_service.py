"""
Persistence use cases for projects, activities and time entries.

Each collection is one JSON array under its own storage key. Every write reads
the whole array, changes it and writes the whole array back.
"""

from __future__ import annotations

import json
from typing import Callable, List, Optional, TypeVar

from timetracker.core.config import Settings, get_settings
from timetracker.domain.entities import Activity, Project, TimeEntry
from timetracker.repositories.storage import KeyValueStore, get_storage

T = TypeVar("T", Project, Activity, TimeEntry)


class TimeTrackingService:
    """CRUD and cascade delete over the three stored collections."""

    PROJECTS_KEY = "timetracker_projects"
    ACTIVITIES_KEY = "timetracker_activities"
    TIME_ENTRIES_KEY = "timetracker_time_entries"

    def __init__(self, storage: KeyValueStore, *, cascade_project_time_entries: bool = False):
        self.storage = storage
        self.cascade_project_time_entries = cascade_project_time_entries

    # -------------------------------------- helpers --------------------------------------
    def _read(self, key: str, factory: Callable[[dict], T]) -> List[T]:
        raw = self.storage.get_item(key) or "[]"
        return [factory(data) for data in json.loads(raw)]

    def _write(self, key: str, items: List[T]) -> None:
        payload = [item.to_dict() for item in items]
        self.storage.set_item(key, json.dumps(payload, ensure_ascii=False))

    def _upsert(self, key: str, factory: Callable[[dict], T], entity: T) -> None:
        items = self._read(key, factory)
        for index, item in enumerate(items):
            if item.id == entity.id:
                items[index] = entity
                break
        else:
            items.append(entity)
        self._write(key, items)

    # -------------------------------------- projects --------------------------------------
    def save_project(self, project: Project) -> None:
        self._upsert(self.PROJECTS_KEY, Project.from_dict, project)

    def get_projects(self) -> List[Project]:
        return self._read(self.PROJECTS_KEY, Project.from_dict)

    def get_project_by_id(self, project_id: str) -> Optional[Project]:
        return next((p for p in self.get_projects() if p.id == project_id), None)

    def delete_project(self, project_id: str) -> None:
        """
        Remove a project and its activities.

        Time entries under those activities are only removed when
        cascade_project_time_entries is on; otherwise they stay behind as
        orphans (see delete_orphaned_time_entries).
        """
        projects = [p for p in self.get_projects() if p.id != project_id]
        self._write(self.PROJECTS_KEY, projects)

        activities = self.get_activities()
        deleted_activity_ids = {a.id for a in activities if a.project_id == project_id}
        self._write(self.ACTIVITIES_KEY, [a for a in activities if a.project_id != project_id])

        if self.cascade_project_time_entries and deleted_activity_ids:
            entries = [e for e in self.get_time_entries() if e.activity_id not in deleted_activity_ids]
            self._write(self.TIME_ENTRIES_KEY, entries)

    # -------------------------------------- activities --------------------------------------
    def save_activity(self, activity: Activity) -> None:
        self._upsert(self.ACTIVITIES_KEY, Activity.from_dict, activity)

    def get_activities(self) -> List[Activity]:
        return self._read(self.ACTIVITIES_KEY, Activity.from_dict)

    def get_activities_by_project_id(self, project_id: str) -> List[Activity]:
        return [a for a in self.get_activities() if a.project_id == project_id]

    def get_activity_by_id(self, activity_id: str) -> Optional[Activity]:
        return next((a for a in self.get_activities() if a.id == activity_id), None)

    def delete_activity(self, activity_id: str) -> None:
        activities = [a for a in self.get_activities() if a.id != activity_id]
        self._write(self.ACTIVITIES_KEY, activities)

        entries = [e for e in self.get_time_entries() if e.activity_id != activity_id]
        self._write(self.TIME_ENTRIES_KEY, entries)

    # -------------------------------------- time entries --------------------------------------
    def save_time_entry(self, time_entry: TimeEntry) -> None:
        self._upsert(self.TIME_ENTRIES_KEY, TimeEntry.from_dict, time_entry)

    def get_time_entries(self) -> List[TimeEntry]:
        return self._read(self.TIME_ENTRIES_KEY, TimeEntry.from_dict)

    def get_time_entry_by_id(self, entry_id: str) -> Optional[TimeEntry]:
        return next((e for e in self.get_time_entries() if e.id == entry_id), None)

    def get_time_entries_by_activity_id(self, activity_id: str) -> List[TimeEntry]:
        return [e for e in self.get_time_entries() if e.activity_id == activity_id]

    def delete_time_entry(self, entry_id: str) -> None:
        entries = [e for e in self.get_time_entries() if e.id != entry_id]
        self._write(self.TIME_ENTRIES_KEY, entries)

    def delete_orphaned_time_entries(self) -> int:
        """Drop entries whose activity no longer exists; returns how many went away."""
        activity_ids = {a.id for a in self.get_activities()}
        entries = self.get_time_entries()
        kept = [e for e in entries if e.activity_id in activity_ids]
        removed = len(entries) - len(kept)
        if removed:
            self._write(self.TIME_ENTRIES_KEY, kept)
        return removed


def create_service(
    storage: KeyValueStore | None = None,
    settings: Settings | None = None,
    *,
    cascade_project_time_entries: bool | None = None,
) -> TimeTrackingService:
    """Wire a service from settings; callers share the returned handle."""
    settings = settings or get_settings()
    if cascade_project_time_entries is None:
        cascade_project_time_entries = settings.cascade_project_time_entries
    return TimeTrackingService(
        storage if storage is not None else get_storage(settings),
        cascade_project_time_entries=cascade_project_time_entries,
    )
