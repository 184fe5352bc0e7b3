"""Domain records and validation rules."""

from .entities import (
    Activity,
    InvalidHoursError,
    Project,
    TimeEntry,
    TimeTrackingError,
    new_id,
)

__all__ = ["Activity", "InvalidHoursError", "Project", "TimeEntry", "TimeTrackingError", "new_id"]
