"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date, datetime


def clock_label(dt: datetime) -> str:
    """24-hour clock with seconds, e.g. ``14:05:00``."""
    return dt.strftime("%H:%M:%S")


def time_of_day_label(dt: datetime | None) -> str:
    """12-hour time for sunrise/sunset, e.g. ``6:02 AM``. Dash when missing."""
    if dt is None:
        return "\u2013"
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def day_label(day: date) -> str:
    """Long day label for the selected-day heading, e.g. ``Sunday, Oct 18``."""
    return f"{day.strftime('%A, %b')} {day.day}"
