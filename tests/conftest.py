import pytest

from availability_schedule import AvailabilitySchedule

WINDOW_START = "2024-01-01T00:00:00+00:00"
WINDOW_END = "2024-01-15T00:00:00+00:00"


@pytest.fixture
def empty_schedule() -> AvailabilitySchedule:
    """Two-week window starting on Monday 2024-01-01."""

    return AvailabilitySchedule(WINDOW_START, WINDOW_END)


@pytest.fixture
def workday_schedule(empty_schedule: AvailabilitySchedule) -> AvailabilitySchedule:
    empty_schedule.add("2024-01-01T09:00", "2024-01-01T17:00")
    return empty_schedule
