"""
Prefect flows.

Flows:
- render: Fetch the forecast once and render a dashboard snapshot (HTML)

Usage (local):
    python -m lakmeteo.flows.render > dashboard.html

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m lakmeteo.flows.render
"""
