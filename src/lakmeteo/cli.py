"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from lakmeteo import __version__
from lakmeteo.analysis.forecast_views import (
    current_card,
    daily_chart_points,
    round_half_up,
)
from lakmeteo.config import get_settings
from lakmeteo.dashboard import Dashboard
from lakmeteo.datasources.weather.client import (
    LATITUDE,
    LOCATION_NAME,
    LONGITUDE,
    REFRESH_INTERVAL_SECONDS,
    ForecastError,
)
from lakmeteo.datasources.weather.forecast import fetch_forecast
from lakmeteo.flows.render import render_dashboard
from lakmeteo.schemas import Tab
from lakmeteo.server import DashboardServer

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="lakmeteo",
        description=f"Weather dashboard for {LOCATION_NAME}",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'show' command - one fetch, text summary
    subparsers.add_parser("show", help="Fetch the forecast once and print a summary")

    # 'render' command - one-shot HTML page via the Prefect flow
    render_parser = subparsers.add_parser("render", help="Render a dashboard page to stdout")
    render_parser.add_argument(
        "--tab",
        choices=[t.value for t in Tab],
        default=Tab.HOURLY.value,
        help="Tab to render (default: hourly)",
    )
    render_parser.add_argument(
        "--day",
        type=int,
        default=None,
        help="Day index for the hourly table (default: today)",
    )

    # 'serve' command - live dashboard
    serve_parser = subparsers.add_parser("serve", help="Serve the live dashboard")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Location: {LOCATION_NAME} ({LATITUDE}, {LONGITUDE})")
    print(f"Refresh interval: {REFRESH_INTERVAL_SECONDS}s")
    return 0


def cmd_show(_args: argparse.Namespace) -> int:
    """Handle the 'show' command: fetch once and print a text summary."""
    try:
        raw = fetch_forecast()
    except ForecastError as e:
        print(f"Error: failed to load weather data: {e}", file=sys.stderr)
        return 1

    print(LOCATION_NAME)
    card = current_card(raw)
    if card is not None:
        print(f"  Now: {card.icon} {card.temperature}°C, {card.description}")
        print(f"  Wind {card.wind_speed:g} km/h (observed {card.time:%H:%M})")

    for point in daily_chart_points(raw):
        high = "-" if point.max is None else f"{round_half_up(point.max)}°C"
        low = "-" if point.min is None else f"{round_half_up(point.min)}°C"
        rain = "-" if point.precipitation_max is None else f"{point.precipitation_max}%"
        print(f"  {point.label} {point.date:%d %b}: max {high}, min {low}, rain {rain}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the 'render' command: run the render flow, print the HTML."""
    html = render_dashboard(tab=args.tab, day=args.day)
    sys.stdout.write(html)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: fetch on schedule and serve the page."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port

    dashboard = Dashboard()
    dashboard.start()
    try:
        with DashboardServer(("", port), dashboard) as server:
            print(f"Serving LakMeteo on http://localhost:{port}/ (Ctrl+C to stop)")
            try:
                server.serve_forever()
            except KeyboardInterrupt:
                print("\nServer stopped.")
    finally:
        dashboard.close()

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    configure_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "show": cmd_show,
        "render": cmd_render,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
