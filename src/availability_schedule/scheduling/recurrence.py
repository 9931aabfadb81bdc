"""Weekly recurrence expansion.

A template occurrence contributes its clock time, its UTC offset and its
duration; its calendar date is ignored. Matching days are generated with
``dateutil.rrule`` on naive calendar dates in the template's offset, then each
day is combined with the template's time of day.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from dateutil.rrule import FR, MO, SA, SU, TH, TU, WE, WEEKLY, rrule

from availability_schedule.core.errors import InvalidWeekday
from availability_schedule.core.types import Interval

logger = logging.getLogger(__name__)

# ISO weekday 1..7 -> rrule weekday
_RRULE_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)


def normalize_weekdays(weekdays: Iterable[int]) -> tuple[int, ...]:
    """Validate ISO weekdays (1 = Monday .. 7 = Sunday) and return them sorted."""

    if isinstance(weekdays, (str, bytes)):
        raise InvalidWeekday(f"weekdays must be a collection of integers (got {weekdays!r})")
    try:
        values = list(weekdays)
    except TypeError as exc:
        raise InvalidWeekday(
            f"weekdays must be a collection of integers (got {type(weekdays).__name__})"
        ) from exc
    if not values:
        raise InvalidWeekday("weekdays must contain at least one day")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 7:
            raise InvalidWeekday(f"weekday {value!r} is outside 1..7 (Monday..Sunday)")
    return tuple(sorted(set(values)))


def expand_weekly(
    template: Interval,
    weekdays: Iterable[int],
    window_start: datetime,
    window_end: datetime,
) -> list[Interval]:
    """Return the template's occurrences on ``weekdays``, clipped to the window.

    Occurrences that do not reach into ``[window_start, window_end]`` (including
    ones that only touch a boundary) are dropped.
    """

    days = normalize_weekdays(weekdays)
    if window_end <= window_start:
        return []
    offset = template.start.tzinfo
    time_of_day = template.start.timetz()
    duration = template.duration

    # Days before the window are scanned too, so a template running past
    # midnight into the window start is kept in clipped form.
    try:
        first_day = (window_start.astimezone(offset) - duration - timedelta(days=1)).date()
    except OverflowError:
        first_day = date.min
    try:
        last_day = window_end.astimezone(offset).date()
    except OverflowError:
        last_day = date.max
    if last_day < first_day:
        return []

    rule = rrule(
        WEEKLY,
        dtstart=datetime.combine(first_day, datetime.min.time()),
        until=datetime.combine(last_day, datetime.min.time()),
        byweekday=[_RRULE_WEEKDAYS[day - 1] for day in days],
    )

    occurrences: list[Interval] = []
    for day in rule:
        start = datetime.combine(day.date(), time_of_day)
        try:
            end = start + duration
        except OverflowError:
            end = window_end
        if end <= window_start or start >= window_end:
            continue
        occurrences.append(Interval(max(start, window_start), min(end, window_end)))

    logger.debug(
        "Expanded weekly template %s-%s on %s into %d occurrence(s)",
        template.start.isoformat(),
        template.end.isoformat(),
        days,
        len(occurrences),
    )
    return occurrences


__all__ = ["normalize_weekdays", "expand_weekly"]
