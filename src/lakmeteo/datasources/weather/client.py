"""Open-Meteo API client constants and error types.

API docs: https://open-meteo.com/en/docs
"""

from __future__ import annotations

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Colombo, Sri Lanka
LOCATION_NAME = "Colombo, Sri Lanka"
LATITUDE = 6.9271
LONGITUDE = 79.8612
TIMEZONE = "Asia/Colombo"

REFRESH_INTERVAL_SECONDS = 600  # 10 minutes

HOURS_PER_DAY = 24

# Variables we request from Open-Meteo
HOURLY_VARS = [
    "temperature_2m",
    "precipitation_probability",
    "relative_humidity_2m",
    "weathercode",
]
DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "sunrise",
    "sunset",
    "precipitation_probability_max",
    "weathercode",
]


class ForecastError(Exception):
    """Base error for a failed forecast fetch."""

    kind = "unknown"


class NetworkError(ForecastError):
    """The request could not be sent or timed out."""

    kind = "network"


class HttpError(ForecastError):
    """The API answered with a non-2xx status."""

    kind = "http"

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(ForecastError):
    """The body was not JSON or not the expected shape."""

    kind = "parse"
