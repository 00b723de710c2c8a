"""Forecast normalization: raw Open-Meteo response -> derived views.

Dependency rule: analysis/ imports schemas and datasource *constants* only.
It never fetches data or produces HTML.

Modules:
  - forecast_views: hourly/daily chart points, day slices, current card
  - weather_codes: WMO code -> icon/description table
  - models: frozen dataclasses for the derived view
"""

from lakmeteo.analysis.forecast_views import (
    FALLBACK_DAY_INDEX,
    covers_whole_days,
    current_card,
    daily_chart_points,
    derive_view,
    hourly_chart_points,
    iter_hourly_points,
    selected_day_index,
    slice_hourly_for_day,
)
from lakmeteo.analysis.models import (
    CurrentCard,
    DailyChartPoint,
    DerivedView,
    HourlyChartPoint,
    HourlyEntry,
)
from lakmeteo.analysis.weather_codes import UNKNOWN, WMO_CONDITIONS, description_for, icon_for

__all__ = [
    "FALLBACK_DAY_INDEX",
    "UNKNOWN",
    "WMO_CONDITIONS",
    "CurrentCard",
    "DailyChartPoint",
    "DerivedView",
    "HourlyChartPoint",
    "HourlyEntry",
    "covers_whole_days",
    "current_card",
    "daily_chart_points",
    "derive_view",
    "description_for",
    "hourly_chart_points",
    "icon_for",
    "iter_hourly_points",
    "selected_day_index",
    "slice_hourly_for_day",
]
