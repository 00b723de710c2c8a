"""LakMeteo - weather dashboard for Colombo, Sri Lanka.

Architecture::

    datasources/   Open-Meteo forecast client (URL, query params, error types)
    services/      Shared HTTP session
    analysis/      Pure normalizer: raw forecast -> chart points, day slices, WMO codes
    fetcher.py     Scheduled fetcher, sequence-numbered result application
    dashboard.py   Presentation state (last good forecast, selected day, active tab)
    renderers/     Pure data -> HTML (current card, hourly/daily tabs)
    flows/         Prefect orchestration (one-shot snapshot render)
    server.py      Local dashboard server

Data flow: datasources -> fetcher -> dashboard -> analysis -> renderers
"""

__version__ = "0.1.0"

from lakmeteo.config import Settings
from lakmeteo.schemas import FetchState, FetchStatus, RawForecast, Tab

__all__ = ["FetchState", "FetchStatus", "RawForecast", "Settings", "Tab", "__version__"]
