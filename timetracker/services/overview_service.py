"""
Read-only summaries of logged time: totals per activity, totals per day and
the per-day breakdown by activity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, List, Optional

from timetracker.core.config import get_settings
from timetracker.domain.entities import TimeEntry
from timetracker.services.time_tracking_service import TimeTrackingService

UNKNOWN_PROJECT = "Unknown Project"
UNKNOWN_ACTIVITY = "Unknown"

# date.weekday(): Monday is 0, Sunday is 6
_WEEK_START_WEEKDAY = {"monday": 0, "sunday": 6}


@dataclass
class ActivitySummary:
    activity_id: str
    name: str
    project_name: str
    hours: float = 0
    entries: List[TimeEntry] = field(default_factory=list)
    found: bool = True

    @property
    def label(self) -> str:
        if not self.found:
            return UNKNOWN_ACTIVITY
        return f"{self.name} ({self.project_name})"


@dataclass
class DaySummary:
    day: date
    hours: float = 0
    by_activity: Dict[str, float] = field(default_factory=dict)


@dataclass
class Overview:
    entries: List[TimeEntry]
    activities: List[ActivitySummary]
    days: List[DaySummary]

    @property
    def total_hours(self) -> float:
        return sum(entry.hours for entry in self.entries)


def start_of_week(today: date, week_start: str = "sunday") -> datetime:
    """Midnight UTC of the most recent week-start day on or before today."""
    first_weekday = _WEEK_START_WEEKDAY.get(week_start, 6)
    offset = (today.weekday() - first_weekday) % 7
    return datetime.combine(today - timedelta(days=offset), time.min, tzinfo=timezone.utc)


def entry_day(entry: TimeEntry) -> date:
    return entry.date.astimezone(timezone.utc).date()


def build_overview(
    service: TimeTrackingService,
    *,
    this_week_only: bool = False,
    sort_by_hours_descending: bool = True,
    today: Optional[date] = None,
    week_start: Optional[str] = None,
) -> Overview:
    entries = service.get_time_entries()
    project_names = {p.id: p.name for p in service.get_projects()}
    activities = {
        a.id: (a.name, project_names.get(a.project_id, UNKNOWN_PROJECT))
        for a in service.get_activities()
    }

    if this_week_only:
        today = today or datetime.now(timezone.utc).date()
        cutoff = start_of_week(today, week_start or get_settings().week_start)
        entries = [e for e in entries if e.date >= cutoff]

    by_activity: Dict[str, ActivitySummary] = {}
    by_day: Dict[date, DaySummary] = {}
    for entry in entries:
        summary = by_activity.get(entry.activity_id)
        if summary is None:
            found = entry.activity_id in activities
            name, project_name = activities.get(entry.activity_id, (UNKNOWN_ACTIVITY, UNKNOWN_PROJECT))
            summary = by_activity[entry.activity_id] = ActivitySummary(
                entry.activity_id, name, project_name, found=found
            )
        summary.hours += entry.hours
        summary.entries.append(entry)

        day = entry_day(entry)
        day_summary = by_day.setdefault(day, DaySummary(day))
        day_summary.hours += entry.hours
        day_summary.by_activity[entry.activity_id] = day_summary.by_activity.get(entry.activity_id, 0) + entry.hours

    return Overview(
        entries=entries,
        activities=sorted(by_activity.values(), key=lambda s: s.hours, reverse=sort_by_hours_descending),
        days=[
            DaySummary(
                d.day,
                d.hours,
                dict(sorted(d.by_activity.items(), key=lambda kv: kv[1], reverse=sort_by_hours_descending)),
            )
            for d in sorted(by_day.values(), key=lambda d: d.day, reverse=True)
        ],
    )
