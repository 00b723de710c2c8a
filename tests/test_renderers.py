"""Tests for the dashboard HTML renderers."""

from __future__ import annotations

from datetime import date, datetime

from conftest import make_payload
from lakmeteo.analysis.forecast_views import derive_view
from lakmeteo.renderers import render_template
from lakmeteo.renderers.dashboard import (
    build_current_html,
    build_daily_html,
    build_dashboard_html,
    build_hourly_html,
)
from lakmeteo.renderers.date_utils import clock_label, day_label, time_of_day_label
from lakmeteo.schemas import FetchStatus, RawForecast, Tab


class TestDateUtils:
    def test_clock_label(self) -> None:
        assert clock_label(datetime(2026, 10, 18, 14, 5)) == "14:05:00"

    def test_time_of_day_label(self) -> None:
        assert time_of_day_label(datetime(2026, 10, 18, 6, 2)) == "6:02 AM"
        assert time_of_day_label(datetime(2026, 10, 18, 18, 4)) == "6:04 PM"
        assert time_of_day_label(datetime(2026, 10, 18, 0, 30)) == "12:30 AM"
        assert time_of_day_label(datetime(2026, 10, 18, 12, 0)) == "12:00 PM"

    def test_time_of_day_label_missing(self) -> None:
        assert time_of_day_label(None) == "\u2013"

    def test_day_label(self) -> None:
        assert day_label(date(2026, 10, 18)) == "Sunday, Oct 18"


class TestRenderTemplate:
    def test_autoescape(self) -> None:
        html = render_template("current.html.j2", location="<b>x</b>")
        assert "&lt;b&gt;x&lt;/b&gt;" in html


class TestCurrentHtml:
    def test_card(self, forecast: RawForecast) -> None:
        view = derive_view(forecast, 0)
        html = build_current_html(view.current)
        assert "Colombo, Sri Lanka" in html
        assert "29°C" in html
        assert "Wind 11.2 km/h" in html
        assert "Time: 14:00:00" in html
        assert "Overcast" in html

    def test_missing(self) -> None:
        assert "No current conditions available." in build_current_html(None)


class TestHourlyHtml:
    def test_selected_day_table(self, forecast: RawForecast) -> None:
        html = build_hourly_html(derive_view(forecast, 1))
        assert "Hourly Temperature" in html
        assert "Monday, Oct 19" in html
        assert html.count("<tr>") == 25  # header + 24 hours
        assert "<td>13:00</td>" in html

    def test_no_hourly_data(self) -> None:
        payload = make_payload()
        del payload["hourly"]
        html = build_hourly_html(derive_view(RawForecast.model_validate(payload), 0))
        assert "No hourly forecast available." in html

    def test_day_without_hours(self) -> None:
        raw = RawForecast.model_validate(make_payload(days=7, hours=24))
        html = build_hourly_html(derive_view(raw, 3))
        assert "No hourly data for this day." in html


class TestDailyHtml:
    def test_cards(self, forecast: RawForecast) -> None:
        html = build_daily_html(derive_view(forecast, 2))
        assert "7-Day Forecast" in html
        assert html.count("<a class=\"day") == 7
        assert html.count("day selected") == 1
        assert "Max: 31°C" in html
        assert "Min: 24°C" in html
        assert "Rain: 40%" in html
        assert "Sunrise 6:02 AM" in html
        assert "/?tab=hourly&amp;day=6" in html

    def test_no_daily_data(self) -> None:
        payload = make_payload()
        del payload["daily"]
        html = build_daily_html(derive_view(RawForecast.model_validate(payload), 0))
        assert "No daily forecast available." in html


class TestDashboardHtml:
    def test_success_page(self, forecast: RawForecast) -> None:
        html = build_dashboard_html(
            FetchStatus.success(forecast, sequence=1), derive_view(forecast, 0), Tab.DAILY
        )
        assert "<title>LakMeteo</title>" in html
        assert 'content="600"' in html
        assert "7-Day Forecast" in html
        assert "Failed to load" not in html

    def test_error_keeps_old_data(self, forecast: RawForecast) -> None:
        status = FetchStatus.failed("HTTP 500: Internal Server Error", kind="http", sequence=2)
        html = build_dashboard_html(status, derive_view(forecast, 0))
        assert "Failed to load weather data: HTTP 500: Internal Server Error" in html
        assert "Hourly Temperature" in html

    def test_first_load(self) -> None:
        html = build_dashboard_html(FetchStatus.loading(1), None, loading=True)
        assert "Loading weather data..." in html
        assert 'href="/refresh"' in html

    def test_refreshing_over_data(self, forecast: RawForecast) -> None:
        html = build_dashboard_html(
            FetchStatus.loading(2), derive_view(forecast, 0), "hourly", loading=True
        )
        assert "Refreshing weather data..." in html
        assert 'class="active">Hourly' in html

    def test_reason_is_escaped(self) -> None:
        status = FetchStatus.failed("<script>", kind="http", sequence=1)
        html = build_dashboard_html(status, None)
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
