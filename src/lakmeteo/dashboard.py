"""Presentation state for the dashboard page.

Holds what the page needs between renders: the last successfully fetched
forecast, the selected day and the active tab. A failed or in-flight fetch
never clears the last good forecast; the page keeps showing it under an
error or loading banner.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from lakmeteo.analysis.forecast_views import derive_view, selected_day_index
from lakmeteo.datasources.weather.client import TIMEZONE
from lakmeteo.fetcher import ForecastFetcher
from lakmeteo.schemas import FetchState, Tab

if TYPE_CHECKING:
    from collections.abc import Callable
    from concurrent.futures import Future

    from lakmeteo.analysis.models import DerivedView
    from lakmeteo.schemas import FetchStatus, RawForecast

logger = logging.getLogger(__name__)


def location_today() -> date:
    """Today's date at the dashboard location."""
    return datetime.now(ZoneInfo(TIMEZONE)).date()


class Dashboard:
    """Single-page dashboard state driven by a ``ForecastFetcher``."""

    def __init__(
        self,
        fetcher: ForecastFetcher | None = None,
        *,
        today: Callable[[], date] = location_today,
    ) -> None:
        self.fetcher = fetcher or ForecastFetcher()
        self.active_tab = Tab.HOURLY
        self.forecast: RawForecast | None = None
        self._today = today
        self._selected_day: int | None = None
        self._unsubscribe = self.fetcher.subscribe(self._on_status)

    def _on_status(self, status: FetchStatus) -> None:
        if status.state is FetchState.SUCCESS and status.forecast is not None:
            self.forecast = status.forecast
            if self._selected_day is not None and self._selected_day >= self.day_count:
                logger.debug("Day %d not in new forecast, back to today", self._selected_day)
                self._selected_day = None
        elif status.state is FetchState.FAILED:
            logger.debug("Keeping last good forecast after failure: %s", status.reason)

    # -- read side -----------------------------------------------------------

    @property
    def status(self) -> FetchStatus:
        return self.fetcher.status

    @property
    def loading(self) -> bool:
        return self.status.state is FetchState.LOADING or self.fetcher.pending > 0

    @property
    def day_count(self) -> int:
        if self.forecast is None or self.forecast.daily is None:
            return 0
        return len(self.forecast.daily.time)

    @property
    def selected_day(self) -> int:
        """User's pick, else today's index in the current forecast."""
        if self._selected_day is not None:
            return self._selected_day
        if self.forecast is None:
            return 0
        return selected_day_index(self.forecast, self._today())

    def view(self) -> DerivedView | None:
        """Derived view of the last good forecast, or None before the first success."""
        if self.forecast is None:
            return None
        return derive_view(self.forecast, self.selected_day)

    # -- write side ----------------------------------------------------------

    def select_day(self, index: int) -> None:
        """Select a day by index into the daily series."""
        if index < 0 or (self.forecast is not None and index >= self.day_count):
            msg = f"Day index {index} out of range (0..{max(self.day_count - 1, 0)})"
            raise ValueError(msg)
        self._selected_day = index

    def select_tab(self, tab: Tab | str) -> None:
        """Switch between the hourly and daily tabs."""
        self.active_tab = Tab(tab)

    def refresh(self) -> Future[FetchStatus] | None:
        """Manual refresh, outside the fetch schedule."""
        return self.fetcher.refresh()

    def start(self) -> None:
        self.fetcher.start()

    def stop(self) -> None:
        self.fetcher.stop()

    def close(self) -> None:
        self._unsubscribe()
        self.fetcher.close()
