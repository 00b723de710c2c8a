"""Scheduled forecast fetcher.

Fetches the forecast once on ``start()`` and then every
``REFRESH_INTERVAL_SECONDS``, publishing a ``FetchStatus`` to subscribers
after every transition.

Attempts run on a small thread pool and may overlap (a manual refresh while
a scheduled one is still in flight). Every attempt gets a sequence number
when it is issued; a completion older than the newest one already applied
is dropped, so a slow early response never overwrites a newer one.

Failures are reported, never raised: there is no retry other than the next
scheduled tick.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING

from lakmeteo.analysis.forecast_views import covers_whole_days
from lakmeteo.datasources.weather.client import REFRESH_INTERVAL_SECONDS, ForecastError
from lakmeteo.datasources.weather.forecast import fetch_forecast
from lakmeteo.schemas import FetchState, FetchStatus

if TYPE_CHECKING:
    from collections.abc import Callable

    from lakmeteo.schemas import RawForecast

    Listener = Callable[[FetchStatus], None]

logger = logging.getLogger(__name__)


class ForecastFetcher:
    """Periodically fetches the forecast and tracks the latest status."""

    def __init__(
        self,
        loader: Callable[[], RawForecast] = fetch_forecast,
        *,
        interval_seconds: float = REFRESH_INTERVAL_SECONDS,
        max_workers: int = 4,
    ) -> None:
        self.loader = loader
        self.interval_seconds = interval_seconds

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="lakmeteo-fetch"
        )
        self._lock = threading.RLock()
        self._status = FetchStatus.idle()
        self._settled = self._status  # last applied outcome, or idle
        self._listeners: list[Listener] = []

        self._issued = 0  # last sequence number handed out
        self._applied = 0  # sequence number of the current status
        self._discard_below = 0  # completions below this landed after stop()
        self._stopped = False
        self._closed = False

        self._stop_event: threading.Event | None = None
        self._timer: threading.Thread | None = None

    # -- observers -----------------------------------------------------------

    @property
    def status(self) -> FetchStatus:
        with self._lock:
            return self._status

    @property
    def pending(self) -> int:
        """Attempts issued after the currently applied one and not yet settled."""
        with self._lock:
            return self._issued - self._applied

    @property
    def running(self) -> bool:
        with self._lock:
            return self._timer is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for status changes; returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # -- lifecycle -----------------------------------------------------------

    def start(self) -> None:
        """Fetch now, then every ``interval_seconds``. No-op if already started.

        Raises:
            RuntimeError: The fetcher has been closed.
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("ForecastFetcher is closed")
            if self._timer is not None:
                return
            self._stopped = False
            stop_event = threading.Event()
            self._stop_event = stop_event
            timer = threading.Thread(
                target=self._run_schedule,
                args=(stop_event,),
                name="lakmeteo-schedule",
                daemon=True,
            )
            logger.info("Starting forecast refresh every %ss", self.interval_seconds)
            self.refresh()
            self._timer = timer
            timer.start()

    def stop(self) -> None:
        """Cancel the schedule. In-flight attempts finish but are not applied.

        Outstanding attempts are settled immediately: the status falls back to
        the last applied outcome and ``pending`` drops to 0.
        """
        with self._lock:
            timer, stop_event = self._timer, self._stop_event
            self._timer = None
            self._stop_event = None
            self._stopped = True
            self._discard_below = self._issued + 1
            if self._applied < self._issued:
                self._applied = self._issued
                self._publish(self._settled)
        if stop_event is not None:
            stop_event.set()
        if timer is not None and timer is not threading.current_thread():
            timer.join()
        logger.info("Forecast refresh stopped")

    def close(self) -> None:
        """Stop and release the worker threads (waits for in-flight attempts)."""
        with self._lock:
            self._closed = True
        self.stop()
        self._executor.shutdown(wait=True)

    def _run_schedule(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval_seconds):
            self.refresh()

    # -- fetching ------------------------------------------------------------

    def refresh(self) -> Future[FetchStatus] | None:
        """Issue one fetch now, outside the schedule.

        Returns a future resolving to the attempt's outcome, or None when the
        fetcher has been stopped.
        """
        with self._lock:
            if self._stopped:
                logger.debug("Refresh ignored: fetcher is stopped")
                return None
            self._issued += 1
            seq = self._issued
            if self._status.state is not FetchState.LOADING:
                self._publish(FetchStatus.loading(seq))
            return self._executor.submit(self._attempt, seq)

    def _attempt(self, seq: int) -> FetchStatus:
        logger.debug("Forecast fetch #%d started", seq)
        try:
            forecast = self.loader()
        except ForecastError as e:
            logger.warning("Forecast fetch #%d failed (%s): %s", seq, e.kind, e)
            outcome = FetchStatus.failed(str(e), kind=e.kind, sequence=seq)
        except Exception as e:
            logger.exception("Forecast fetch #%d crashed", seq)
            outcome = FetchStatus.failed(f"Unexpected error: {e}", kind="unexpected", sequence=seq)
        else:
            if not covers_whole_days(forecast):
                logger.warning("Forecast #%d hourly series does not cover whole days", seq)
            outcome = FetchStatus.success(forecast, sequence=seq)
        self._settle(seq, outcome)
        return outcome

    def _settle(self, seq: int, outcome: FetchStatus) -> None:
        with self._lock:
            if seq < self._discard_below:
                logger.info("Discarding fetch #%d: completed after stop()", seq)
                return
            if seq < self._applied:
                logger.info("Discarding fetch #%d: #%d already applied", seq, self._applied)
                return
            self._applied = seq
            self._settled = outcome
            self._publish(outcome)

    def _publish(self, status: FetchStatus) -> None:
        # Caller holds the lock, so listeners see transitions in order.
        self._status = status
        for listener in list(self._listeners):
            try:
                listener(status)
            except Exception:
                logger.exception("Status listener %r failed", listener)
