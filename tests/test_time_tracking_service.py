from __future__ import annotations

import json
import sys
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

# Garante que o pacote timetracker seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timetracker.core import config as core_config  # noqa: E402
from timetracker.domain.entities import Activity, Project, TimeEntry  # noqa: E402
from timetracker.repositories.json_storage import JSONFileStorage  # noqa: E402
from timetracker.repositories.storage import MemoryStorage  # noqa: E402
from timetracker.services.time_tracking_service import TimeTrackingService, create_service  # noqa: E402


@pytest.fixture(params=["memory", "json"])
def storage(request, tmp_path):
    if request.param == "json":
        return JSONFileStorage(tmp_path / "timetracker.json")
    return MemoryStorage()


@pytest.fixture()
def service(storage):
    return TimeTrackingService(storage)


def _seed(service: TimeTrackingService) -> None:
    service.save_project(Project(id="1", name="P"))
    service.save_activity(Activity(id="1", name="A", project_id="1"))
    service.save_time_entry(TimeEntry(id="1", hours=2, date="2025-05-03", activity_id="1"))


def test_empty_storage_reads_as_empty_collections(service):
    assert service.get_projects() == []
    assert service.get_activities() == []
    assert service.get_time_entries() == []
    assert service.get_project_by_id("missing") is None
    assert service.get_activity_by_id("missing") is None
    assert service.get_time_entry_by_id("missing") is None


def test_save_and_retrieve_projects(service):
    project = Project(id="1", name="Test Project", description="A test project")
    service.save_project(project)

    projects = service.get_projects()
    assert len(projects) == 1
    assert projects[0] == project
    assert projects[0] is not project
    assert service.get_project_by_id("1") == project


def test_save_replaces_existing_id_in_place(service):
    service.save_project(Project(id="1", name="First"))
    service.save_project(Project(id="2", name="Second"))
    service.save_project(Project(id="3", name="Third"))

    service.save_project(Project(id="2", name="Renamed", description="now with text"))

    projects = service.get_projects()
    assert [p.id for p in projects] == ["1", "2", "3"]
    assert projects[1].name == "Renamed"
    assert projects[1].description == "now with text"

    service.save_project(Project(id="4", name="Fourth"))
    assert [p.id for p in service.get_projects()] == ["1", "2", "3", "4"]


def test_activities_filtered_by_project(service):
    service.save_project(Project(id="1", name="P1"))
    service.save_project(Project(id="2", name="P2"))
    service.save_activity(Activity(id="a", name="A", project_id="1"))
    service.save_activity(Activity(id="b", name="B", project_id="2"))
    service.save_activity(Activity(id="c", name="C", project_id="1"))

    assert [a.id for a in service.get_activities_by_project_id("1")] == ["a", "c"]
    assert [a.id for a in service.get_activities_by_project_id("2")] == ["b"]
    assert service.get_activities_by_project_id("3") == []
    assert service.get_activity_by_id("b").project_id == "2"


def test_time_entry_round_trip_keeps_calendar_date(service):
    _seed(service)

    entries = service.get_time_entries_by_activity_id("1")
    assert len(entries) == 1
    entry = entries[0]
    assert entry.id == "1"
    assert entry.hours == 2
    assert entry.date == datetime(2025, 5, 3, tzinfo=timezone.utc)
    assert entry.date.date() == date(2025, 5, 3)
    assert service.get_time_entry_by_id("1") == entry


def test_stored_layout_uses_json_arrays(service, storage):
    _seed(service)
    service.save_project(Project(id="2", name="Described", description="d"))

    assert json.loads(storage.get_item("timetracker_projects")) == [
        {"id": "1", "name": "P"},
        {"id": "2", "name": "Described", "description": "d"},
    ]
    assert json.loads(storage.get_item("timetracker_activities")) == [
        {"id": "1", "name": "A", "projectId": "1"},
    ]
    assert json.loads(storage.get_item("timetracker_time_entries")) == [
        {"id": "1", "hours": 2, "date": "2025-05-03T00:00:00.000Z", "activityId": "1"},
    ]


def test_delete_time_entry_only_removes_that_entry(service):
    _seed(service)
    service.save_time_entry(TimeEntry(id="2", hours=1, date="2025-05-04", activity_id="1"))

    service.delete_time_entry("1")

    assert [e.id for e in service.get_time_entries_by_activity_id("1")] == ["2"]
    assert service.get_activity_by_id("1") is not None


def test_delete_activity_cascades_to_time_entries(service):
    _seed(service)
    service.save_activity(Activity(id="2", name="B", project_id="1"))
    service.save_time_entry(TimeEntry(id="2", hours=3, date="2025-05-04", activity_id="2"))

    service.delete_activity("1")

    assert [a.id for a in service.get_activities_by_project_id("1")] == ["2"]
    assert service.get_time_entries_by_activity_id("1") == []
    assert [e.id for e in service.get_time_entries()] == ["2"]


def test_delete_project_removes_activities_but_keeps_entries_by_default(service, storage):
    _seed(service)
    service.save_project(Project(id="2", name="Other"))
    service.save_activity(Activity(id="2", name="B", project_id="2"))

    service.delete_project("1")

    assert [p.id for p in service.get_projects()] == ["2"]
    assert service.get_activities_by_project_id("1") == []
    assert [a.id for a in service.get_activities()] == ["2"]
    # lancamento orfao continua no armazenamento
    stored = json.loads(storage.get_item("timetracker_time_entries"))
    assert [e["activityId"] for e in stored] == ["1"]
    assert service.get_time_entries_by_activity_id("1")[0].hours == 2


def test_delete_project_with_cascade_removes_entries(storage):
    service = TimeTrackingService(storage, cascade_project_time_entries=True)
    _seed(service)
    service.save_activity(Activity(id="2", name="B", project_id="2"))
    service.save_time_entry(TimeEntry(id="2", hours=1, date="2025-05-04", activity_id="2"))

    service.delete_project("1")

    assert service.get_time_entries_by_activity_id("1") == []
    assert [e.id for e in service.get_time_entries()] == ["2"]


def test_delete_orphaned_time_entries(service):
    _seed(service)
    service.save_time_entry(TimeEntry(id="2", hours=1, date="2025-05-04", activity_id="ghost"))
    service.delete_project("1")

    assert service.delete_orphaned_time_entries() == 2
    assert service.get_time_entries() == []
    assert service.delete_orphaned_time_entries() == 0


def test_delete_missing_ids_is_a_noop(service):
    _seed(service)

    service.delete_project("missing")
    service.delete_activity("missing")
    service.delete_time_entry("missing")

    assert len(service.get_projects()) == 1
    assert len(service.get_activities()) == 1
    assert len(service.get_time_entries()) == 1


def test_two_handles_share_the_same_storage(storage):
    writer = TimeTrackingService(storage)
    reader = TimeTrackingService(storage)
    writer.save_project(Project(id="1", name="P"))
    assert reader.get_project_by_id("1") == Project(id="1", name="P")


def test_create_service_reads_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("TIMETRACKER_STORAGE", "json")
    monkeypatch.setenv("TIMETRACKER_DATA_FILE", str(tmp_path / "data.json"))
    monkeypatch.setenv("TIMETRACKER_CASCADE_PROJECT_ENTRIES", "yes")
    core_config.get_settings.cache_clear()
    try:
        service = create_service()
        assert service.cascade_project_time_entries is True
        assert isinstance(service.storage, JSONFileStorage)
        assert service.storage.path == tmp_path / "data.json"

        injected = MemoryStorage()
        assert create_service(storage=injected).storage is injected
    finally:
        core_config.get_settings.cache_clear()


def test_time_entry_with_microseconds_round_trips(service):
    entry = TimeEntry(
        id="1",
        hours=1,
        date=datetime(2025, 5, 3, 10, 0, 0, 123456, tzinfo=timezone.utc),
        activity_id="1",
    )
    service.save_time_entry(entry)

    assert service.get_time_entry_by_id("1") == entry
    assert entry.date.microsecond == 123000
