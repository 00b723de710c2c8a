"""
Local dashboard server.

Serves the live dashboard page from a running ``Dashboard``:

    GET /             page; ``?tab=hourly|daily`` and ``?day=N`` update the selection
    GET|POST /refresh manual refresh, then redirect to /
    GET /api/view     JSON status + derived view
"""

from __future__ import annotations

import http.server
import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, urlsplit

from lakmeteo.renderers.dashboard import build_dashboard_html

if TYPE_CHECKING:
    from lakmeteo.dashboard import Dashboard

logger = logging.getLogger(__name__)


class DashboardRequestHandler(http.server.BaseHTTPRequestHandler):
    """Routes requests to the server's ``Dashboard``."""

    server: DashboardServer

    def do_GET(self) -> None:
        url = urlsplit(self.path)
        if url.path == "/":
            self._page(parse_qs(url.query))
        elif url.path == "/refresh":
            self._refresh()
        elif url.path == "/api/view":
            self._api_view()
        else:
            self._send(404, "text/plain; charset=utf-8", b"Not found")

    def do_POST(self) -> None:
        if urlsplit(self.path).path == "/refresh":
            self._refresh()
        else:
            self._send(404, "text/plain; charset=utf-8", b"Not found")

    def _page(self, query: dict[str, list[str]]) -> None:
        dashboard = self.server.dashboard
        try:
            if "tab" in query:
                dashboard.select_tab(query["tab"][0])
            if "day" in query:
                dashboard.select_day(int(query["day"][0]))
        except ValueError as e:
            self._send(400, "text/plain; charset=utf-8", str(e).encode())
            return

        html = build_dashboard_html(
            dashboard.status,
            dashboard.view(),
            dashboard.active_tab,
            loading=dashboard.loading,
        )
        self._send(200, "text/html; charset=utf-8", html.encode())

    def _refresh(self) -> None:
        self.server.dashboard.refresh()
        self.send_response(303)
        self.send_header("Location", "/")
        self.end_headers()

    def _api_view(self) -> None:
        dashboard = self.server.dashboard
        status = dashboard.status
        view = dashboard.view()
        payload: dict[str, Any] = {
            "status": {
                "state": status.state.value,
                "sequence": status.sequence,
                "reason": status.reason,
                "error_kind": status.error_kind,
            },
            "loading": dashboard.loading,
            "active_tab": dashboard.active_tab.value,
            "view": asdict(view) if view is not None else None,
        }
        body = json.dumps(payload, default=str).encode()
        self._send(200, "application/json", body)

    def _send(self, code: int, content_type: str, body: bytes) -> None:
        self.send_response(code)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.info("%s - %s", self.address_string(), format % args)


class DashboardServer(http.server.ThreadingHTTPServer):
    """HTTP server bound to one ``Dashboard``."""

    daemon_threads = True

    def __init__(self, address: tuple[str, int], dashboard: Dashboard) -> None:
        super().__init__(address, DashboardRequestHandler)
        self.dashboard = dashboard
