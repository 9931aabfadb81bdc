"""Exceptions raised by availability schedules."""


class ScheduleError(ValueError):
    """Raised when a schedule operation receives invalid input."""


class InvalidRange(ScheduleError):
    """Raised when a range does not start strictly before it ends."""


class InvalidWeekday(ScheduleError):
    """Raised when a weekday set is empty or holds values outside 1..7."""


class InvalidTimestamp(ScheduleError):
    """Raised when an ISO-8601 timestamp cannot be parsed."""


class InvalidOffset(ScheduleError):
    """Raised when a UTC offset (or timestamp carrying one) cannot be parsed."""


__all__ = [
    "ScheduleError",
    "InvalidRange",
    "InvalidWeekday",
    "InvalidTimestamp",
    "InvalidOffset",
]
