"""
Domain models for LakMeteo.

Pydantic models for the Open-Meteo forecast response and for the fetch
status the fetcher publishes. The response models mirror the API's field
names so ``RawForecast.model_validate(resp.json())`` needs no mapping.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum
from typing import Self

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Raw forecast (Open-Meteo response)
# =============================================================================

_CODE_ALIASES = AliasChoices("weathercode", "weather_code")


class _Series(BaseModel):
    """Index-aligned arrays keyed by ``time``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="after")
    def _check_aligned(self) -> Self:
        expected = len(self.time)  # type: ignore[attr-defined]
        for name in type(self).model_fields:
            values = getattr(self, name)
            if values and len(values) != expected:
                msg = f"{name} has {len(values)} entries, expected {expected}"
                raise ValueError(msg)
        return self


class CurrentWeather(BaseModel):
    """The ``current_weather`` block."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature: float
    windspeed: float
    winddirection: float | None = None
    weathercode: int = Field(validation_alias=_CODE_ALIASES)
    is_day: int | None = None
    time: datetime


class HourlySeries(_Series):
    """Hourly arrays, one entry per hour of the forecast window."""

    time: tuple[datetime, ...] = ()
    temperature_2m: tuple[float | None, ...] = ()
    precipitation_probability: tuple[int | None, ...] = ()
    relative_humidity_2m: tuple[int | None, ...] = ()
    weathercode: tuple[int | None, ...] = Field(default=(), validation_alias=_CODE_ALIASES)


class DailySeries(_Series):
    """Daily arrays, one entry per forecast day."""

    time: tuple[date, ...] = ()
    temperature_2m_max: tuple[float | None, ...] = ()
    temperature_2m_min: tuple[float | None, ...] = ()
    sunrise: tuple[datetime | None, ...] = ()
    sunset: tuple[datetime | None, ...] = ()
    precipitation_probability_max: tuple[int | None, ...] = ()
    weathercode: tuple[int | None, ...] = Field(default=(), validation_alias=_CODE_ALIASES)


class RawForecast(BaseModel):
    """One Open-Meteo forecast response for the dashboard location.

    Timestamps are naive and already local to the location (the request
    sets ``timezone``). Every block is optional so partial responses still
    parse; the normalizer turns missing blocks into empty views.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    utc_offset_seconds: int | None = None
    current_weather: CurrentWeather | None = None
    hourly: HourlySeries | None = None
    daily: DailySeries | None = None


# =============================================================================
# Fetch status
# =============================================================================


class FetchState(StrEnum):
    """Lifecycle state of the most recent fetch attempt."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class FetchStatus(BaseModel):
    """Outcome of a fetch attempt. Replaced wholesale, never patched."""

    model_config = ConfigDict(frozen=True)

    state: FetchState
    sequence: int = 0
    forecast: RawForecast | None = None
    reason: str | None = None
    error_kind: str | None = None

    @classmethod
    def idle(cls) -> FetchStatus:
        return cls(state=FetchState.IDLE)

    @classmethod
    def loading(cls, sequence: int) -> FetchStatus:
        return cls(state=FetchState.LOADING, sequence=sequence)

    @classmethod
    def success(cls, forecast: RawForecast, sequence: int) -> FetchStatus:
        return cls(state=FetchState.SUCCESS, sequence=sequence, forecast=forecast)

    @classmethod
    def failed(cls, reason: str, kind: str, sequence: int) -> FetchStatus:
        return cls(state=FetchState.FAILED, sequence=sequence, reason=reason, error_kind=kind)


# =============================================================================
# Presentation
# =============================================================================


class Tab(StrEnum):
    """Forecast tab shown below the current conditions."""

    HOURLY = "hourly"
    DAILY = "daily"
