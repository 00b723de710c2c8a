"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a default timeout and
User-Agent. Retries are disabled: a failed forecast fetch is simply
reported, and the fetcher's next scheduled tick is the retry. All
datasource modules should use this instead of bare ``requests.get``.

Usage::

    from lakmeteo.services.http import session

    resp = session.get("https://api.open-meteo.com/v1/forecast", params=...)
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from lakmeteo import __version__
from lakmeteo.config import get_settings

#: No transport-level retries; the fetch schedule resyncs instead.
DEFAULT_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    redirect=3,
    raise_on_status=False,  # caller inspects resp.ok / status_code
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"lakmeteo/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session(timeout=get_settings().request_timeout)
