"""Shared fixtures: Open-Meteo shaped payloads for Colombo."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

import pytest

from lakmeteo.schemas import RawForecast

START = date(2026, 10, 18)


def make_payload(days: int = 7, hours: int | None = None, start: date = START) -> dict[str, Any]:
    """Build a forecast response with ``days`` daily and ``hours`` hourly entries.

    ``hours`` defaults to ``days * 24``.
    """
    if hours is None:
        hours = days * 24
    t0 = datetime(start.year, start.month, start.day)
    hourly_times = [t0 + timedelta(hours=h) for h in range(hours)]
    day_dates = [start + timedelta(days=d) for d in range(days)]
    return {
        "latitude": 6.9271,
        "longitude": 79.8612,
        "timezone": "Asia/Colombo",
        "utc_offset_seconds": 19800,
        "current_weather": {
            "temperature": 28.5,
            "windspeed": 11.2,
            "winddirection": 240.0,
            "weathercode": 3,
            "is_day": 1,
            "time": f"{start.isoformat()}T14:00",
        },
        "hourly": {
            "time": [t.strftime("%Y-%m-%dT%H:%M") for t in hourly_times],
            "temperature_2m": [25.0 + (t.hour % 12) / 2 for t in hourly_times],
            "precipitation_probability": [(t.hour * 3) % 100 for t in hourly_times],
            "relative_humidity_2m": [70 + t.hour % 20 for t in hourly_times],
            "weathercode": [61 if t.hour >= 15 else 2 for t in hourly_times],
        },
        "daily": {
            "time": [d.isoformat() for d in day_dates],
            "temperature_2m_max": [31.0 + i for i in range(days)],
            "temperature_2m_min": [24.0 + i for i in range(days)],
            "sunrise": [f"{d.isoformat()}T06:02" for d in day_dates],
            "sunset": [f"{d.isoformat()}T18:04" for d in day_dates],
            "precipitation_probability_max": [40 + 5 * i for i in range(days)],
            "weathercode": [95, 80, 3, 2, 61, 63, 1][:days] + [0] * max(days - 7, 0),
        },
    }


@pytest.fixture
def payload() -> dict[str, Any]:
    """A full 7-day / 168-hour response body."""
    return make_payload()


@pytest.fixture
def forecast(payload: dict[str, Any]) -> RawForecast:
    """The full response parsed into a ``RawForecast``."""
    return RawForecast.model_validate(payload)
