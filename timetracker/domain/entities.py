"""Domain records for projects, activities and time entries."""
from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from datetime import date as date_type, datetime, time, timezone
from typing import Any, Mapping, Optional


class TimeTrackingError(Exception):
    """Base class for time tracking errors."""


class InvalidHoursError(TimeTrackingError, ValueError):
    def __init__(self, hours: Any):
        super().__init__("Hours cannot be negative")
        self.hours = hours


def new_id() -> str:
    """Random identifier for a new project, activity or time entry."""
    return str(uuid.uuid4())


def parse_entry_date(value: datetime | date_type | str) -> datetime:
    """
    Normalize an entry date to an aware datetime.

    Naive values and bare calendar dates are taken as UTC, so "2025-05-03"
    becomes midnight UTC of that day.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date_type):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise TypeError(f"Unsupported date value: {value!r}")


def format_entry_date(value: datetime) -> str:
    """ISO-8601 UTC string with milliseconds and a Z suffix."""
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass
class Project:
    id: str
    name: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"id": self.id, "name": self.name}
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Project:
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            description=_optional_text(data.get("description")),
        )


@dataclass
class Activity:
    id: str
    name: str
    project_id: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"id": self.id, "name": self.name}
        if self.description is not None:
            data["description"] = self.description
        data["projectId"] = self.project_id
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Activity:
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            project_id=str(data.get("projectId") or ""),
            description=_optional_text(data.get("description")),
        )


@dataclass
class TimeEntry:
    """A logged duration against one activity. Hours are never negative."""

    id: str
    hours: float
    date: datetime
    activity_id: str
    description: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.hours, bool) or not isinstance(self.hours, (int, float)):
            raise TypeError(f"Hours must be a number, got {self.hours!r}")
        if not math.isfinite(self.hours):
            raise ValueError(f"Hours must be finite, got {self.hours!r}")
        if self.hours < 0:
            raise InvalidHoursError(self.hours)
        # stored dates keep milliseconds only
        parsed = parse_entry_date(self.date)
        self.date = parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "hours": self.hours,
            "date": format_entry_date(self.date),
            "activityId": self.activity_id,
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TimeEntry:
        return cls(
            id=str(data["id"]),
            hours=data.get("hours"),
            date=data.get("date"),
            activity_id=str(data.get("activityId") or ""),
            description=_optional_text(data.get("description")),
        )
