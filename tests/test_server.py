"""Tests for the local dashboard server."""

from __future__ import annotations

import threading
import time
from datetime import date
from typing import TYPE_CHECKING

import pytest
import requests

from lakmeteo.dashboard import Dashboard
from lakmeteo.datasources.weather.client import HttpError
from lakmeteo.fetcher import ForecastFetcher
from lakmeteo.schemas import Tab
from lakmeteo.server import DashboardServer

if TYPE_CHECKING:
    from collections.abc import Iterator

    from lakmeteo.schemas import RawForecast

TIMEOUT = 5


class Loader:
    def __init__(self, forecast: RawForecast) -> None:
        self.forecast = forecast
        self.fail = False
        self.calls = 0

    def __call__(self) -> RawForecast:
        self.calls += 1
        if self.fail:
            raise HttpError(500, "HTTP 500: Internal Server Error")
        return self.forecast


@pytest.fixture
def loader(forecast: RawForecast) -> Loader:
    return Loader(forecast)


@pytest.fixture
def dashboard(loader: Loader) -> Iterator[Dashboard]:
    board = Dashboard(ForecastFetcher(loader), today=lambda: date(2026, 10, 18))
    future = board.refresh()
    assert future is not None
    future.result(TIMEOUT)
    yield board
    board.close()


@pytest.fixture
def base_url(dashboard: Dashboard) -> Iterator[str]:
    server = DashboardServer(("127.0.0.1", 0), dashboard)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    thread.join(TIMEOUT)


class TestPage:
    def test_index(self, base_url: str) -> None:
        resp = requests.get(f"{base_url}/", timeout=TIMEOUT)
        assert resp.status_code == 200
        assert resp.headers["Content-Type"].startswith("text/html")
        assert "Colombo, Sri Lanka" in resp.text
        assert "Hourly Temperature" in resp.text

    def test_tab_and_day_query(self, base_url: str, dashboard: Dashboard) -> None:
        resp = requests.get(f"{base_url}/?tab=daily&day=3", timeout=TIMEOUT)
        assert resp.status_code == 200
        assert "7-Day Forecast" in resp.text
        assert dashboard.active_tab is Tab.DAILY
        assert dashboard.selected_day == 3

    @pytest.mark.parametrize("query", ["tab=weekly", "day=9", "day=abc"])
    def test_bad_query(self, base_url: str, query: str) -> None:
        resp = requests.get(f"{base_url}/?{query}", timeout=TIMEOUT)
        assert resp.status_code == 400

    def test_not_found(self, base_url: str) -> None:
        assert requests.get(f"{base_url}/nope", timeout=TIMEOUT).status_code == 404
        assert requests.post(f"{base_url}/nope", timeout=TIMEOUT).status_code == 404

    def test_failure_banner_over_old_data(
        self, base_url: str, dashboard: Dashboard, loader: Loader
    ) -> None:
        loader.fail = True
        future = dashboard.refresh()
        assert future is not None
        future.result(TIMEOUT)

        resp = requests.get(f"{base_url}/", timeout=TIMEOUT)
        assert "Failed to load weather data: HTTP 500: Internal Server Error" in resp.text
        assert "Hourly Temperature" in resp.text


class TestRefresh:
    @pytest.mark.parametrize("method", ["get", "post"])
    def test_redirects_home(self, base_url: str, loader: Loader, method: str) -> None:
        before = loader.calls
        resp = requests.request(
            method, f"{base_url}/refresh", allow_redirects=False, timeout=TIMEOUT
        )
        assert resp.status_code == 303
        assert resp.headers["Location"] == "/"

        deadline = time.monotonic() + TIMEOUT
        while loader.calls == before and time.monotonic() < deadline:
            time.sleep(0.01)
        assert loader.calls == before + 1


class TestApiView:
    def test_json(self, base_url: str) -> None:
        resp = requests.get(f"{base_url}/api/view", timeout=TIMEOUT)
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"]["state"] == "success"
        assert body["status"]["sequence"] == 1
        assert body["active_tab"] == "hourly"
        assert body["view"]["selected_day"] == 0
        assert len(body["view"]["daily_points"]) == 7
        assert body["view"]["current"]["temperature"] == 29
