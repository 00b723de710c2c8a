"""
Prefect flow for rendering one dashboard snapshot.

Fetches the forecast once, derives the view for the requested tab and day,
and returns the full HTML page. The live, auto-refreshing dashboard is
``lakmeteo serve``; this flow is the one-shot equivalent.

Run locally:
    python -m lakmeteo.flows.render > dashboard.html
"""

from __future__ import annotations

import sys

from prefect import flow, task

from lakmeteo.analysis.forecast_views import derive_view, selected_day_index
from lakmeteo.analysis.models import DerivedView  # noqa: TC001 - task signature
from lakmeteo.dashboard import location_today
from lakmeteo.datasources.weather import forecast as weather_forecast
from lakmeteo.datasources.weather.client import ForecastError
from lakmeteo.renderers.dashboard import build_dashboard_html
from lakmeteo.schemas import FetchStatus, RawForecast, Tab


@task(name="fetch-forecast")
def fetch_forecast() -> RawForecast:
    """Fetch the forecast for the dashboard location.

    No task-level retries: a failure is rendered as the page's error banner.
    """
    return weather_forecast.fetch_forecast()


@task(name="derive-view")
def derive(raw: RawForecast, day: int | None = None) -> DerivedView:
    """Derive the view; ``day`` defaults to today's index in the forecast."""
    selected = day if day is not None else selected_day_index(raw, location_today())
    return derive_view(raw, selected)


@task(name="build-html")
def build_html(status: FetchStatus, view: DerivedView | None, tab: Tab) -> str:
    """Render the dashboard page."""
    return build_dashboard_html(status, view, tab)


@flow(name="render-dashboard", log_prints=True)
def render_dashboard(tab: str = Tab.HOURLY.value, day: int | None = None) -> str:
    """
    Fetch, derive and render one dashboard page.

    Fetch errors do not fail the flow; the page carries the error banner.
    """
    active_tab = Tab(tab)
    try:
        raw = fetch_forecast()
    except ForecastError as e:
        print(f"Forecast fetch failed ({e.kind}): {e}")
        status = FetchStatus.failed(str(e), kind=e.kind, sequence=1)
        return build_html(status, None, active_tab)

    view = derive(raw, day)
    print(f"Derived {len(view.hourly_points)} hourly / {len(view.daily_points)} daily points")
    return build_html(FetchStatus.success(raw, sequence=1), view, active_tab)


if __name__ == "__main__":
    sys.stdout.write(render_dashboard())
