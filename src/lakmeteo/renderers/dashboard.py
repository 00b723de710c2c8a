"""Dashboard page renderers.

Current conditions card, hourly tab (temperature series + selected-day
table) and daily tab (7-day cards). ``build_dashboard_html`` assembles the
full page with the status banner and auto-refresh.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lakmeteo.analysis.forecast_views import round_half_up
from lakmeteo.analysis.weather_codes import description_for, icon_for
from lakmeteo.datasources.weather.client import LOCATION_NAME, REFRESH_INTERVAL_SECONDS
from lakmeteo.renderers import render_template
from lakmeteo.renderers.date_utils import clock_label, day_label, time_of_day_label
from lakmeteo.schemas import FetchState, Tab

if TYPE_CHECKING:
    from lakmeteo.analysis.models import CurrentCard, DerivedView
    from lakmeteo.schemas import FetchStatus


def _temp(value: float | None) -> str:
    return "\u2013" if value is None else f"{round_half_up(value)}°C"


def _pct(value: int | None) -> str:
    return "\u2013" if value is None else f"{value}%"


def build_current_html(current: CurrentCard | None) -> str:
    """Current temperature, wind and observation time."""
    if current is None:
        return "<p>No current conditions available.</p>"
    return render_template(
        "current.html.j2",
        location=LOCATION_NAME,
        temperature=f"{current.temperature}°C",
        icon=current.icon,
        description=current.description,
        wind=f"Wind {current.wind_speed:g} km/h",
        observed=clock_label(current.time),
    )


def build_hourly_html(view: DerivedView) -> str:
    """Hourly temperature series and the selected day's hour-by-hour table."""
    if not view.hourly_points:
        return "<p>No hourly forecast available.</p>"

    temps = [p.temperature for p in view.hourly_points if p.temperature is not None]
    low = min(temps, default=0.0)
    high = max(temps, default=0.0)
    span = (high - low) or 1.0

    series = [
        {
            "label": p.label,
            "temp": _temp(p.temperature),
            # Bar height in percent, matching the chart's dataMin-2..dataMax+2 domain
            "height": 0
            if p.temperature is None
            else round(100 * (p.temperature - low + 2) / (span + 4)),
        }
        for p in view.hourly_points
    ]

    rows = [
        {
            "label": e.label,
            "icon": icon_for(e.weather_code),
            "description": description_for(e.weather_code),
            "temp": _temp(e.temperature),
            "precip": _pct(e.precipitation_probability),
            "humidity": _pct(e.relative_humidity),
        }
        for e in view.selected_day_points
    ]

    heading = "Selected day"
    if 0 <= view.selected_day < len(view.daily_points):
        heading = day_label(view.daily_points[view.selected_day].date)

    return render_template("hourly.html.j2", series=series, rows=rows, heading=heading)


def build_daily_html(view: DerivedView) -> str:
    """One card per forecast day; the selected day is highlighted and clickable."""
    if not view.daily_points:
        return "<p>No daily forecast available.</p>"

    days = [
        {
            "index": i,
            "label": p.label,
            "selected": i == view.selected_day,
            "icon": icon_for(p.weather_code),
            "description": description_for(p.weather_code),
            "max": _temp(p.max),
            "min": _temp(p.min),
            "precip": _pct(p.precipitation_max),
            "sunrise": time_of_day_label(p.sunrise),
            "sunset": time_of_day_label(p.sunset),
        }
        for i, p in enumerate(view.daily_points)
    ]
    return render_template("daily.html.j2", days=days)


def _banner(status: FetchStatus, loading: bool, has_data: bool) -> dict[str, Any] | None:
    if status.state is FetchState.FAILED:
        return {"kind": "error", "text": f"Failed to load weather data: {status.reason}"}
    if loading:
        text = "Refreshing weather data..." if has_data else "Loading weather data..."
        return {"kind": "loading", "text": text}
    return None


def build_dashboard_html(
    status: FetchStatus,
    view: DerivedView | None,
    tab: Tab = Tab.HOURLY,
    *,
    loading: bool = False,
    refresh_seconds: int = REFRESH_INTERVAL_SECONDS,
) -> str:
    """Full dashboard page.

    ``view`` is the last good forecast's view (None before the first
    success); ``status`` drives the banner, so a failure is shown above the
    still-visible older data.
    """
    tab = Tab(tab)
    current_html = ""
    tab_html = ""
    if view is not None:
        current_html = build_current_html(view.current)
        tab_html = build_hourly_html(view) if tab is Tab.HOURLY else build_daily_html(view)

    return render_template(
        "base.html.j2",
        title="LakMeteo",
        banner=_banner(status, loading, view is not None),
        has_data=view is not None,
        current=current_html,
        tab_content=tab_html,
        active_tab=tab.value,
        tabs=[t.value for t in Tab],
        selected_day=view.selected_day if view is not None else 0,
        refresh_seconds=refresh_seconds,
    )
