"""Tapping Time - when to tap maple trees, from your local forecast.

Architecture::

    scoring/       Pure decision logic (day ratings, windows, recommendations,
                   season timing by latitude)
    date_utils.py  Day-of-year conversion and date labels
    datasources/   External APIs (Pirate Weather forecast)
    store.py       JSON cache with TTL (3-hour forecast entries)
    analysis/      Upstream payload -> scored ForecastResult
    renderers/     Pure data -> HTML (Jinja2 templates)
    flows/         Prefect orchestration (fetch checks freshness, build renders site)
    services/      HTTP client with retry, cache-aware forecast service
    server.py      /api/forecast JSON endpoint + static page

Data flow: datasources -> store (cache) -> analysis (scoring) -> renderers / API
"""

__version__ = "0.1.0"

from tapping_time.config import Settings
from tapping_time.schemas import ForecastResult

__all__ = ["ForecastResult", "Settings", "__version__"]
