"""Pure rendering functions: derived views -> HTML strings.

All renderers follow the same pattern:
  - Input: dataclasses from analysis/ (plus plain flags/strings)
  - Output: str (HTML fragment, or the full page for ``build_dashboard_html``)
  - No side effects, no I/O, no Prefect decorators

Used by flows/render.py and server.py.

Public API:
  - dashboard: build_current_html, build_hourly_html, build_daily_html,
    build_dashboard_html
  - date_utils: clock_label, time_of_day_label, day_label

Adding a section
----------------
1. Add a ``build_{name}_html`` function in ``renderers/dashboard.py`` that
   renders ``templates/{name}.html.j2``.
2. Templates produce HTML fragments (no <html>/<body> tags); the page
   shell and CSS live in ``templates/base.html.j2``.
3. Pass the fragment to ``base.html.j2`` from ``build_dashboard_html``.
4. Add tests asserting the returned HTML contains the expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
