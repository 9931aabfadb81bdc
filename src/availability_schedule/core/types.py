from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from .errors import InvalidRange


@dataclass(frozen=True, slots=True)
class Interval:
    """Closed range between two timezone-aware instants (``start < end``)."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise InvalidRange(
                f"start ({self.start.isoformat()}) must be before end ({self.end.isoformat()})"
            )

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, other: Interval) -> bool:
        """True when the two ranges share more than a boundary instant."""
        return self.start < other.end and other.start < self.end

    def touches(self, other: Interval) -> bool:
        """True when the ranges overlap or meet end-to-start."""
        return self.start <= other.end and other.start <= self.end

    def contains(self, other: Interval) -> bool:
        return self.start <= other.start and other.end <= self.end


__all__ = ["Interval"]
