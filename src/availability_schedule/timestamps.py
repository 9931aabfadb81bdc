"""ISO-8601 parsing and formatting for schedule boundaries.

Timestamps are normalised to timezone-aware ``datetime`` values carrying a fixed
``datetime.timezone``. Strings without an offset are read as UTC. Offsets are
resolved from either a bare suffix (``"-05:00"``, ``"+0000"``, ``"Z"``) or a full
timestamp ending in one, e.g. ``"2000-01-01T00:00:00-04:00"``.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Union

from dateutil.parser import isoparser

from availability_schedule.core.errors import InvalidOffset, InvalidTimestamp

TimestampInput = Union[str, datetime]

DEFAULT_OFFSET = "+00:00"

_ISO_PARSER = isoparser()
_BARE_OFFSET = re.compile(r"^(?:[Zz]|[+-]\d{2}(?::?\d{2})?)$")


def _fixed(tzinfo, when: datetime | None = None) -> timezone:
    delta = tzinfo.utcoffset(when)
    if delta is None:
        raise ValueError("offset is undefined")
    return timezone(delta)


def parse_instant(value: TimestampInput, *, name: str = "timestamp") -> datetime:
    """Parse ``value`` into an aware datetime, keeping its source offset.

    ``datetime`` inputs are accepted as-is (naive ones are treated as UTC).
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = _ISO_PARSER.isoparse(value.strip())
        except (ValueError, OverflowError) as exc:
            raise InvalidTimestamp(f"{name} is not a valid ISO-8601 timestamp: {value!r}") from exc
    else:
        raise InvalidTimestamp(
            f"{name} must be an ISO-8601 string or datetime (got {type(value).__name__})"
        )
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.replace(tzinfo=_fixed(parsed.tzinfo, parsed))


def resolve_offset(value: str = DEFAULT_OFFSET) -> timezone:
    """Extract the UTC offset from a bare offset string or a full timestamp."""

    if not isinstance(value, str):
        raise InvalidOffset(f"offset must be a string (got {type(value).__name__})")
    text = value.strip()
    if _BARE_OFFSET.match(text):
        try:
            return _fixed(_ISO_PARSER.parse_tzstr(text))
        except ValueError as exc:
            raise InvalidOffset(f"offset {value!r} is out of range: {exc}") from exc
    try:
        parsed = _ISO_PARSER.isoparse(text)
    except (ValueError, OverflowError) as exc:
        raise InvalidOffset(
            f"offset must look like '-05:00' or a timestamp ending in one (got {value!r})"
        ) from exc
    if parsed.tzinfo is None:
        raise InvalidOffset(f"timestamp {value!r} does not carry a UTC offset")
    return _fixed(parsed.tzinfo, parsed)


def format_instant(instant: datetime, offset: timezone) -> str:
    """Render ``instant`` as ISO-8601 in ``offset``."""
    try:
        return instant.astimezone(offset).isoformat()
    except OverflowError as exc:
        raise InvalidOffset(
            f"{instant.isoformat()} cannot be expressed at offset {offset} "
            "without leaving the supported date range"
        ) from exc


__all__ = [
    "DEFAULT_OFFSET",
    "TimestampInput",
    "parse_instant",
    "resolve_offset",
    "format_instant",
]
