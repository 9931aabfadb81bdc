"""Availability schedule entity.

Example
-------
>>> from availability_schedule import AvailabilitySchedule
>>> schedule = AvailabilitySchedule("2024-01-01T00:00:00+00:00", "2024-01-15T00:00:00+00:00")
>>> schedule.add_weekly_recurring("2024-01-01T09:00:00+00:00", "2024-01-01T10:00:00+00:00", [1, 3])
>>> schedule.remove("2024-01-03T09:30:00+00:00", "2024-01-03T10:00:00+00:00")
>>> [a.start for a in schedule.query("-05:00")][:2]
['2024-01-01T04:00:00-05:00', '2024-01-03T04:00:00-05:00']
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from availability_schedule.core.errors import InvalidRange
from availability_schedule.core.types import Interval
from availability_schedule.scheduling.intervals import (
    find_covering,
    merge_insert,
    split_delete,
    total_duration,
)
from availability_schedule.scheduling.models import Availability
from availability_schedule.scheduling.recurrence import expand_weekly
from availability_schedule.timestamps import (
    DEFAULT_OFFSET,
    TimestampInput,
    format_instant,
    parse_instant,
    resolve_offset,
)

logger = logging.getLogger(__name__)


def _parse_range(start: TimestampInput, end: TimestampInput) -> Interval:
    return Interval(parse_instant(start, name="start"), parse_instant(end, name="end"))


class AvailabilitySchedule:
    """Sorted, merged set of available ranges bounded by a fixed window.

    Parameters
    ----------
    window_start / window_end:
        ISO-8601 timestamps bounding weekly recurrence expansion. Explicitly added
        or removed ranges may fall outside the window.

    Stored ranges are kept sorted by start, disjoint and never touching; every
    operation validates its arguments before mutating, so a failed call leaves
    the schedule unchanged. Instances are not synchronised.
    """

    def __init__(self, window_start: TimestampInput, window_end: TimestampInput) -> None:
        self.window_start: datetime = parse_instant(window_start, name="window_start")
        self.window_end: datetime = parse_instant(window_end, name="window_end")
        if self.window_end < self.window_start:
            raise InvalidRange(
                f"window_start ({self.window_start.isoformat()}) must not be after "
                f"window_end ({self.window_end.isoformat()})"
            )
        self._intervals: list[Interval] = []

    def add(self, start: TimestampInput, end: TimestampInput) -> None:
        """Mark ``[start, end]`` as available, merging with touching ranges."""
        merged = merge_insert(self._intervals, _parse_range(start, end))
        logger.debug("Added availability; covering range is now %s-%s", merged.start, merged.end)

    def add_weekly_recurring(
        self,
        start: TimestampInput,
        end: TimestampInput,
        weekdays: Iterable[int],
    ) -> None:
        """Repeat the ``[start, end]`` template on ISO ``weekdays`` (1 = Monday).

        Weekdays and time of day are evaluated in ``start``'s own offset; the
        template's date is irrelevant and may precede the window. Occurrences are
        clipped to the window.
        """

        template = _parse_range(start, end)
        occurrences = expand_weekly(template, weekdays, self.window_start, self.window_end)
        for occurrence in occurrences:
            merge_insert(self._intervals, occurrence)

    def remove(self, start: TimestampInput, end: TimestampInput) -> None:
        """Cut ``[start, end]`` out of the stored ranges (e.g. a booked meeting)."""
        affected = split_delete(self._intervals, _parse_range(start, end))
        logger.debug("Removed availability from %d stored range(s)", affected)

    def query(self, offset: str = DEFAULT_OFFSET) -> list[Availability]:
        """Return all ranges in chronological order, formatted in ``offset``.

        ``offset`` may be a bare offset such as ``"-05:00"`` or a full timestamp
        whose offset suffix is used.
        """

        target = resolve_offset(offset)
        return [
            Availability(
                start=format_instant(interval.start, target),
                end=format_instant(interval.end, target),
            )
            for interval in self._intervals
        ]

    def contains(self, start: TimestampInput, end: TimestampInput) -> bool:
        """True when ``[start, end]`` lies entirely inside one available range."""
        return find_covering(self._intervals, _parse_range(start, end)) is not None

    def intervals(self) -> tuple[Interval, ...]:
        return tuple(self._intervals)

    def total_duration(self) -> timedelta:
        return total_duration(self._intervals)

    def copy(self) -> AvailabilitySchedule:
        clone = type(self).__new__(type(self))
        clone.window_start = self.window_start
        clone.window_end = self.window_end
        clone._intervals = list(self._intervals)
        return clone

    def __len__(self) -> int:
        return len(self._intervals)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(window_start='{self.window_start.isoformat()}', "
            f"window_end='{self.window_end.isoformat()}', intervals={len(self._intervals)})"
        )


__all__ = ["AvailabilitySchedule"]
