"""CLI helper utilities for availability_schedule."""

from __future__ import annotations

from collections.abc import Sequence


def parse_range(arg: str) -> tuple[str, str]:
    """Split ``START/END`` interval notation into its two timestamps."""
    if "/" not in arg:
        raise ValueError(f"Range must be in START/END format (got '{arg}')")
    start, end = (part.strip() for part in arg.split("/", 1))
    if not start or not end:
        raise ValueError(f"Range is missing a start or end timestamp in '{arg}'")
    return start, end


def parse_weekly(arg: str) -> tuple[str, str, list[int]]:
    """Parse ``START/END@1,3`` into a template range and its ISO weekdays."""
    if "@" not in arg:
        raise ValueError(f"Weekly range must be in START/END@DAYS format (got '{arg}')")
    span, raw_days = arg.rsplit("@", 1)
    start, end = parse_range(span)
    weekdays: list[int] = []
    for raw in raw_days.split(","):
        raw = raw.strip()
        if not raw:
            continue
        try:
            weekdays.append(int(raw))
        except ValueError as exc:
            raise ValueError(f"Weekday must be an integer 1..7 (got '{raw}')") from exc
    return start, end, weekdays


def parse_ranges(args: Sequence[str] | None) -> list[tuple[str, str]]:
    if not args:
        return []
    return [parse_range(arg) for arg in args]


__all__ = ["parse_range", "parse_weekly", "parse_ranges"]
