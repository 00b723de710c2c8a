"""Open-Meteo weather data source.

Fetches the forecast for the dashboard location (free, no API key).

Public API:
  - forecast: fetch_forecast, build_params
  - client: API URL, fixed location, requested variables, error types
"""

from lakmeteo.datasources.weather.client import (
    LATITUDE,
    LOCATION_NAME,
    LONGITUDE,
    OPEN_METEO_API,
    REFRESH_INTERVAL_SECONDS,
    TIMEZONE,
    ForecastError,
    HttpError,
    NetworkError,
    ParseError,
)
from lakmeteo.datasources.weather.forecast import build_params, fetch_forecast

__all__ = [
    "LATITUDE",
    "LOCATION_NAME",
    "LONGITUDE",
    "OPEN_METEO_API",
    "REFRESH_INTERVAL_SECONDS",
    "TIMEZONE",
    "ForecastError",
    "HttpError",
    "NetworkError",
    "ParseError",
    "build_params",
    "fetch_forecast",
]
