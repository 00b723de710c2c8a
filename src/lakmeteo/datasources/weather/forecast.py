"""Forecast for the dashboard location from the Open-Meteo Forecast API."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from lakmeteo.datasources.weather.client import (
    DAILY_VARS,
    HOURLY_VARS,
    LATITUDE,
    LONGITUDE,
    OPEN_METEO_API,
    TIMEZONE,
    HttpError,
    NetworkError,
    ParseError,
)
from lakmeteo.schemas import RawForecast
from lakmeteo.services.http import session

logger = logging.getLogger(__name__)


def build_params(
    lat: float = LATITUDE,
    lon: float = LONGITUDE,
    timezone: str = TIMEZONE,
) -> dict[str, str | float]:
    """Query parameters for one forecast request."""
    return {
        "latitude": lat,
        "longitude": lon,
        "hourly": ",".join(HOURLY_VARS),
        "daily": ",".join(DAILY_VARS),
        "current_weather": "true",
        "timezone": timezone,
    }


def fetch_forecast(
    lat: float = LATITUDE,
    lon: float = LONGITUDE,
    *,
    timezone: str = TIMEZONE,
) -> RawForecast:
    """
    Fetch current, hourly and daily forecast from Open-Meteo.

    Args:
        lat: Latitude (default: Colombo).
        lon: Longitude.
        timezone: Zone the API localizes timestamps to.

    Returns:
        Parsed forecast response.

    Raises:
        NetworkError: The request could not be sent or timed out.
        HttpError: Non-2xx response.
        ParseError: Body is not JSON or not the expected shape.
    """
    params = build_params(lat, lon, timezone)
    logger.debug("GET %s params=%s", OPEN_METEO_API, params)

    try:
        resp = session.get(OPEN_METEO_API, params=params)
    except requests.RequestException as e:
        raise NetworkError(f"Network error: {e}") from e

    if not resp.ok:
        raise HttpError(resp.status_code, _http_error_message(resp))

    try:
        payload: Any = resp.json()
    except ValueError as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e

    try:
        forecast = RawForecast.model_validate(payload)
    except ValidationError as e:
        raise ParseError(
            f"Unexpected response shape ({e.error_count()} validation errors)"
        ) from e

    hours = len(forecast.hourly.time) if forecast.hourly else 0
    days = len(forecast.daily.time) if forecast.daily else 0
    logger.info("Fetched forecast: %d hourly / %d daily entries", hours, days)
    return forecast


def _http_error_message(resp: requests.Response) -> str:
    """Build an error message, using Open-Meteo's ``reason`` when present."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("reason"):
        return f"HTTP {resp.status_code}: {body['reason']}"
    return f"HTTP {resp.status_code}: {resp.text[:200]}"
