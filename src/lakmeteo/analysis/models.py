"""Derived view records consumed by renderers.

Frozen dataclasses so two views built from the same inputs compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lakmeteo.analysis.weather_codes import description_for, icon_for

if TYPE_CHECKING:
    from datetime import date, datetime


@dataclass(frozen=True)
class HourlyChartPoint:
    """One point of the hourly temperature chart."""

    label: str  # "H:00", 24-hour local clock
    temperature: float | None


@dataclass(frozen=True)
class DailyChartPoint:
    """One point of the daily chart, also used for the day cards."""

    label: str  # short weekday name
    max: float | None
    min: float | None
    precipitation_max: int | None
    date: date
    weather_code: int | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None


@dataclass(frozen=True)
class HourlyEntry:
    """All hourly columns for one hour of the selected day."""

    time: datetime
    label: str
    temperature: float | None
    precipitation_probability: int | None
    relative_humidity: int | None
    weather_code: int | None


@dataclass(frozen=True)
class CurrentCard:
    """Current conditions card."""

    temperature: int  # rounded °C
    wind_speed: float
    time: datetime
    weather_code: int
    icon: str
    description: str


@dataclass(frozen=True)
class DerivedView:
    """Everything the page needs, derived from one forecast + selected day."""

    hourly_points: tuple[HourlyChartPoint, ...]
    daily_points: tuple[DailyChartPoint, ...]
    selected_day: int
    selected_day_points: tuple[HourlyEntry, ...]
    current: CurrentCard | None = None

    @staticmethod
    def icon_for(code: int | None) -> str:
        return icon_for(code)

    @staticmethod
    def description_for(code: int | None) -> str:
        return description_for(code)
