"""Reshape a raw forecast into chart- and card-ready views.

Every function here is pure: same input, same output, no I/O, and the
input forecast is never modified. Missing or partial blocks produce empty
sequences (or ``None``) instead of raising, so a half-broken response still
renders whatever it does contain.

Views are recomputed on every call; inputs are at most 168 hourly and 7
daily entries.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeVar

from lakmeteo.analysis.models import (
    CurrentCard,
    DailyChartPoint,
    DerivedView,
    HourlyChartPoint,
    HourlyEntry,
)
from lakmeteo.analysis.weather_codes import description_for, icon_for
from lakmeteo.datasources.weather.client import HOURS_PER_DAY

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from datetime import date, datetime

    from lakmeteo.schemas import RawForecast

T = TypeVar("T")

# Used when today's date is not in the daily series. This can present an
# unrelated day as "today"; kept as-is to match the dashboard's behaviour.
FALLBACK_DAY_INDEX = 0


def _at(values: Sequence[T], i: int) -> T | None:
    """Value at index ``i``, or None when the array is short or missing."""
    return values[i] if 0 <= i < len(values) else None


def hour_label(dt: datetime) -> str:
    """24-hour clock label without zero padding, e.g. ``7:00`` or ``13:00``."""
    return f"{dt.hour}:00"


def iter_hourly_points(raw: RawForecast) -> Iterator[HourlyChartPoint]:
    """Yield one chart point per hourly entry, in order.

    Each call returns a fresh generator.
    """
    hourly = raw.hourly
    if hourly is None:
        return
    for i, ts in enumerate(hourly.time):
        yield HourlyChartPoint(label=hour_label(ts), temperature=_at(hourly.temperature_2m, i))


def hourly_chart_points(raw: RawForecast) -> list[HourlyChartPoint]:
    """All hourly chart points (length == number of hourly entries)."""
    return list(iter_hourly_points(raw))


def daily_chart_points(raw: RawForecast) -> list[DailyChartPoint]:
    """One point per forecast day, labelled with the short weekday name."""
    daily = raw.daily
    if daily is None:
        return []
    return [
        DailyChartPoint(
            label=day.strftime("%a"),
            max=_at(daily.temperature_2m_max, i),
            min=_at(daily.temperature_2m_min, i),
            precipitation_max=_at(daily.precipitation_probability_max, i),
            date=day,
            weather_code=_at(daily.weathercode, i),
            sunrise=_at(daily.sunrise, i),
            sunset=_at(daily.sunset, i),
        )
        for i, day in enumerate(daily.time)
    ]


def selected_day_index(raw: RawForecast, today: date) -> int:
    """Index of ``today`` in the daily series, else ``FALLBACK_DAY_INDEX``.

    Only the calendar date is compared, so a ``datetime`` works too.
    """
    target = (today.year, today.month, today.day)
    if raw.daily is not None:
        for i, day in enumerate(raw.daily.time):
            if (day.year, day.month, day.day) == target:
                return i
    return FALLBACK_DAY_INDEX


def slice_hourly_for_day(raw: RawForecast, day_index: int) -> list[HourlyEntry]:
    """The 24 hourly entries of day ``day_index``.

    Returns only entries that exist: fewer than 24 (or none) when the
    hourly series is short, never padded. A negative index yields nothing.
    """
    hourly = raw.hourly
    if hourly is None or day_index < 0:
        return []
    start = day_index * HOURS_PER_DAY
    stop = min(start + HOURS_PER_DAY, len(hourly.time))
    return [
        HourlyEntry(
            time=hourly.time[i],
            label=hour_label(hourly.time[i]),
            temperature=_at(hourly.temperature_2m, i),
            precipitation_probability=_at(hourly.precipitation_probability, i),
            relative_humidity=_at(hourly.relative_humidity_2m, i),
            weather_code=_at(hourly.weathercode, i),
        )
        for i in range(start, stop)
    ]


def covers_whole_days(raw: RawForecast) -> bool:
    """Whether the hourly series holds exactly 24 entries per daily entry."""
    hours = len(raw.hourly.time) if raw.hourly else 0
    days = len(raw.daily.time) if raw.daily else 0
    return hours == days * HOURS_PER_DAY


def round_half_up(value: float) -> int:
    """Round halves toward +inf: 21.5 -> 22, -2.5 -> -2."""
    return math.floor(value + 0.5)


def current_card(raw: RawForecast) -> CurrentCard | None:
    """Card for the ``current_weather`` block, or None if it is missing."""
    current = raw.current_weather
    if current is None:
        return None
    return CurrentCard(
        temperature=round_half_up(current.temperature),
        wind_speed=current.windspeed,
        time=current.time,
        weather_code=current.weathercode,
        icon=icon_for(current.weathercode),
        description=description_for(current.weathercode),
    )


def derive_view(raw: RawForecast, selected_day: int) -> DerivedView:
    """Build the full view for one forecast and selected day."""
    return DerivedView(
        hourly_points=tuple(iter_hourly_points(raw)),
        daily_points=tuple(daily_chart_points(raw)),
        selected_day=selected_day,
        selected_day_points=tuple(slice_hourly_for_day(raw, selected_day)),
        current=current_card(raw),
    )
