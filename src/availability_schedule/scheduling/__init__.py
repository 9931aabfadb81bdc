"""Scheduling primitives (interval algebra, weekly recurrence, schedule entity)."""

from .models import Availability
from .recurrence import expand_weekly, normalize_weekdays
from .schedule import AvailabilitySchedule

__all__ = ["Availability", "AvailabilitySchedule", "expand_weekly", "normalize_weekdays"]
