"""Maintain sets of available date-time ranges within a scheduling window."""

from availability_schedule.core import (
    Interval,
    InvalidOffset,
    InvalidRange,
    InvalidTimestamp,
    InvalidWeekday,
    ScheduleError,
)
from availability_schedule.scheduling import Availability, AvailabilitySchedule
from availability_schedule.timestamps import DEFAULT_OFFSET

__version__ = "0.1.0"

__all__ = [
    "Availability",
    "AvailabilitySchedule",
    "DEFAULT_OFFSET",
    "Interval",
    "ScheduleError",
    "InvalidRange",
    "InvalidWeekday",
    "InvalidTimestamp",
    "InvalidOffset",
]
