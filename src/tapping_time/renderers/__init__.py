"""Pure rendering functions: forecast results -> HTML strings.

All renderers follow the same pattern:
  - Input: ForecastResult (or a piece of it)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py, which assembles the fragments into base.html.j2.

Public API:
  - tapping: build_current_html, build_recommendation_html,
             build_forecast_days_html, build_season_html, build_page_html
  - weather_utils: c_to_f, format_temp, icon_to_label

Templates live in ``templates/`` and produce fragments (no <html>/<body>)
except ``base.html.j2``.
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
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
