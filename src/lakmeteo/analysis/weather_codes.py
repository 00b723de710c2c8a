"""WMO weather interpretation codes -> display icon and description.

Pure lookups with no external dependencies. The code space is defined by
the weather service and may grow; codes missing from the table map to
``UNKNOWN`` instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class WeatherCondition:
    """Icon and human-readable description for one weather code."""

    icon: str
    description: str


UNKNOWN = WeatherCondition("\U0001f321\ufe0f", "Unknown")

# WMO Weather Interpretation Codes (https://open-meteo.com/en/docs)
WMO_CONDITIONS: MappingProxyType[int, WeatherCondition] = MappingProxyType(
    {
        0: WeatherCondition("\u2600\ufe0f", "Clear sky"),
        1: WeatherCondition("\U0001f324\ufe0f", "Mainly clear"),
        2: WeatherCondition("\u26c5", "Partly cloudy"),
        3: WeatherCondition("\u2601\ufe0f", "Overcast"),
        45: WeatherCondition("\U0001f32b\ufe0f", "Fog"),
        48: WeatherCondition("\U0001f32b\ufe0f", "Depositing rime fog"),
        51: WeatherCondition("\U0001f326\ufe0f", "Light drizzle"),
        53: WeatherCondition("\U0001f326\ufe0f", "Moderate drizzle"),
        55: WeatherCondition("\U0001f326\ufe0f", "Dense drizzle"),
        56: WeatherCondition("\U0001f9ca", "Light freezing drizzle"),
        57: WeatherCondition("\U0001f9ca", "Dense freezing drizzle"),
        61: WeatherCondition("\U0001f327\ufe0f", "Slight rain"),
        63: WeatherCondition("\U0001f327\ufe0f", "Moderate rain"),
        65: WeatherCondition("\U0001f327\ufe0f", "Heavy rain"),
        66: WeatherCondition("\U0001f9ca", "Light freezing rain"),
        67: WeatherCondition("\U0001f9ca", "Heavy freezing rain"),
        71: WeatherCondition("\U0001f328\ufe0f", "Slight snow fall"),
        73: WeatherCondition("\U0001f328\ufe0f", "Moderate snow fall"),
        75: WeatherCondition("\u2744\ufe0f", "Heavy snow fall"),
        77: WeatherCondition("\U0001f328\ufe0f", "Snow grains"),
        80: WeatherCondition("\U0001f326\ufe0f", "Slight rain showers"),
        81: WeatherCondition("\U0001f327\ufe0f", "Moderate rain showers"),
        82: WeatherCondition("\u26c8\ufe0f", "Violent rain showers"),
        85: WeatherCondition("\U0001f328\ufe0f", "Slight snow showers"),
        86: WeatherCondition("\u2744\ufe0f", "Heavy snow showers"),
        95: WeatherCondition("\u26c8\ufe0f", "Thunderstorm"),
        96: WeatherCondition("\u26c8\ufe0f", "Thunderstorm with slight hail"),
        99: WeatherCondition("\u26c8\ufe0f", "Thunderstorm with heavy hail"),
    }
)


def condition_for(code: int | None) -> WeatherCondition:
    """Look up a weather code, falling back to ``UNKNOWN``."""
    if code is None:
        return UNKNOWN
    return WMO_CONDITIONS.get(code, UNKNOWN)


def icon_for(code: int | None) -> str:
    """Display icon (emoji) for a weather code."""
    return condition_for(code).icon


def description_for(code: int | None) -> str:
    """Human-readable description for a weather code."""
    return condition_for(code).description
