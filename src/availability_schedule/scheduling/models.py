"""Pydantic models returned by schedule queries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["Availability"]


class Availability(BaseModel):
    """One available range rendered as ISO-8601 strings.

    Attributes
    ----------
    start:
        Inclusive start of the range, formatted in the requested offset.
    end:
        End of the range, formatted in the same offset as ``start``.
    """

    model_config = ConfigDict(frozen=True)

    start: str
    end: str
