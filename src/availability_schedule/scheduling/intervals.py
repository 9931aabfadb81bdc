"""Sorted interval-list algebra backing availability schedules.

Every function here operates in place on a ``list[Interval]`` that is sorted by
start, pairwise disjoint and free of touching neighbours. Because the stored
ranges never overlap, their ends are sorted too, so both boundaries can be
searched with :mod:`bisect`.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from datetime import datetime, timedelta

from availability_schedule.core.types import Interval


def _start(interval: Interval) -> datetime:
    return interval.start


def _end(interval: Interval) -> datetime:
    return interval.end


def merge_insert(intervals: list[Interval], new: Interval) -> Interval:
    """Insert ``new``, absorbing every stored range it overlaps or touches.

    Returns the interval that now covers ``new``.
    """

    # first range ending at or after new.start .. last range starting at or before new.end
    lo = bisect_left(intervals, new.start, key=_end)
    hi = bisect_right(intervals, new.end, key=_start)
    merged = new
    if lo < hi:
        merged = Interval(
            min(new.start, intervals[lo].start),
            max(new.end, intervals[hi - 1].end),
        )
    intervals[lo:hi] = [merged]
    return merged


def split_delete(intervals: list[Interval], removal: Interval) -> int:
    """Cut ``removal`` out of the stored ranges.

    Covered ranges are dropped, partially covered ones are shrunk, and a range
    strictly containing ``removal`` is split in two. Ranges that merely touch
    ``removal`` are left alone. Returns the number of stored ranges affected.
    """

    lo = bisect_right(intervals, removal.start, key=_end)
    hi = bisect_left(intervals, removal.end, key=_start)
    pieces: list[Interval] = []
    for interval in intervals[lo:hi]:
        if interval.start < removal.start:
            pieces.append(Interval(interval.start, removal.start))
        if removal.end < interval.end:
            pieces.append(Interval(removal.end, interval.end))
    intervals[lo:hi] = pieces
    return hi - lo


def find_covering(intervals: Sequence[Interval], candidate: Interval) -> Interval | None:
    """Return the stored range that fully covers ``candidate``, if any."""

    idx = bisect_right(intervals, candidate.start, key=_start) - 1
    if idx >= 0 and intervals[idx].contains(candidate):
        return intervals[idx]
    return None


def total_duration(intervals: Sequence[Interval]) -> timedelta:
    return sum((interval.duration for interval in intervals), timedelta())


__all__ = ["merge_insert", "split_delete", "find_covering", "total_duration"]
