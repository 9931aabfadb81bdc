"""Core utilities shared across availability_schedule modules."""

from .errors import InvalidOffset, InvalidRange, InvalidTimestamp, InvalidWeekday, ScheduleError
from .types import Interval

__all__ = [
    "Interval",
    "ScheduleError",
    "InvalidRange",
    "InvalidWeekday",
    "InvalidTimestamp",
    "InvalidOffset",
]
