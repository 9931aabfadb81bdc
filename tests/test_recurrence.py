from datetime import datetime, timedelta, timezone

import pytest

from availability_schedule.core.errors import InvalidWeekday
from availability_schedule.core.types import Interval
from availability_schedule.scheduling.recurrence import expand_weekly, normalize_weekdays
from availability_schedule.timestamps import parse_instant

WINDOW_START = parse_instant("2024-01-01T00:00:00+00:00")
WINDOW_END = parse_instant("2024-01-15T00:00:00+00:00")


def _template(start: str, end: str) -> Interval:
    return Interval(parse_instant(start), parse_instant(end))


def _utc(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, minute, tzinfo=timezone.utc)


def test_normalize_weekdays_sorts_and_deduplicates():
    assert normalize_weekdays([3, 1, 3]) == (1, 3)
    assert normalize_weekdays(range(1, 8)) == (1, 2, 3, 4, 5, 6, 7)


@pytest.mark.parametrize("weekdays", [[], [0], [8], [1, 9], [True], [1.0], "13", None])
def test_normalize_weekdays_rejects_invalid(weekdays):
    with pytest.raises(InvalidWeekday):
        normalize_weekdays(weekdays)


def test_expand_weekly_two_weeks_monday_wednesday():
    template = _template("2024-01-01T09:00:00+00:00", "2024-01-01T10:00:00+00:00")
    occurrences = expand_weekly(template, [1, 3], WINDOW_START, WINDOW_END)
    assert [occ.start for occ in occurrences] == [
        _utc(1, 9),
        _utc(3, 9),
        _utc(8, 9),
        _utc(10, 9),
    ]
    assert all(occ.duration == timedelta(hours=1) for occ in occurrences)


def test_expand_weekly_ignores_template_date():
    template = _template("2023-06-05T09:00:00+00:00", "2023-06-05T10:00:00+00:00")
    occurrences = expand_weekly(template, [1, 3], WINDOW_START, WINDOW_END)
    assert len(occurrences) == 4
    assert occurrences[0].start == _utc(1, 9)


def test_expand_weekly_evaluates_weekday_in_template_offset():
    # Monday 23:00 at -05:00 is Tuesday 04:00 UTC
    template = _template("2024-01-01T23:00:00-05:00", "2024-01-02T00:00:00-05:00")
    occurrences = expand_weekly(
        template, [1], WINDOW_START, parse_instant("2024-01-08T00:00:00+00:00")
    )
    assert occurrences == [Interval(_utc(2, 4), _utc(2, 5))]
    assert occurrences[0].start.utcoffset() == timedelta(hours=-5)


def test_expand_weekly_clips_to_window():
    template = _template("2024-01-01T09:00:00+00:00", "2024-01-01T10:00:00+00:00")
    occurrences = expand_weekly(
        template,
        [1],
        parse_instant("2024-01-01T09:30:00+00:00"),
        parse_instant("2024-01-08T09:30:00+00:00"),
    )
    assert occurrences == [
        Interval(_utc(1, 9, 30), _utc(1, 10)),
        Interval(_utc(8, 9), _utc(8, 9, 30)),
    ]


def test_expand_weekly_skips_occurrence_touching_window_boundary():
    template = _template("2024-01-01T09:00:00+00:00", "2024-01-01T10:00:00+00:00")
    occurrences = expand_weekly(
        template,
        [1],
        parse_instant("2024-01-01T10:00:00+00:00"),
        parse_instant("2024-01-02T00:00:00+00:00"),
    )
    assert occurrences == []


def test_expand_weekly_keeps_long_occurrence_starting_before_window():
    template = _template("2023-12-31T20:00:00+00:00", "2024-01-02T20:00:00+00:00")
    occurrences = expand_weekly(
        template, [7], WINDOW_START, parse_instant("2024-01-03T00:00:00+00:00")
    )
    assert occurrences == [Interval(_utc(1, 0), _utc(2, 20))]


def test_expand_weekly_empty_window():
    template = _template("2024-01-01T09:00:00+00:00", "2024-01-01T10:00:00+00:00")
    assert expand_weekly(template, [1], WINDOW_START, WINDOW_START) == []


def test_expand_weekly_validates_weekdays_before_expanding():
    template = _template("2024-01-01T09:00:00+00:00", "2024-01-01T10:00:00+00:00")
    with pytest.raises(InvalidWeekday):
        expand_weekly(template, [], WINDOW_START, WINDOW_END)


def test_expand_weekly_at_start_of_supported_range():
    # 0001-01-01 is a Monday
    template = _template("2024-01-01T09:00:00+00:00", "2024-01-01T10:00:00+00:00")
    occurrences = expand_weekly(
        template,
        [1],
        parse_instant("0001-01-01T00:00:00+00:00"),
        parse_instant("0001-01-15T00:00:00+00:00"),
    )
    assert [(occ.start.day, occ.start.hour) for occ in occurrences] == [(1, 9), (8, 9)]
    assert all(occ.start.year == 1 for occ in occurrences)
