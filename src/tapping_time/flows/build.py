"""
Prefect flow for building the static site from the cached forecast.

Run locally:
    python -m tapping_time.flows.build
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from prefect import flow, task

from tapping_time.analysis.forecast import build_forecast_result
from tapping_time.config import get_settings
from tapping_time.renderers.tapping import build_page_html
from tapping_time.schemas import ForecastResult
from tapping_time.store import DataStore, forecast_path

# Store and output paths
store = DataStore(Path(get_settings().data_dir))
SITE_DIR = store.derived / "site"


@task(name="load-weather")
def load_weather(lat: float, lon: float) -> dict[str, Any] | None:
    """Load the cached forecast payload for a location."""
    return store.read(forecast_path(lat, lon))


@task(name="score-forecast")
def score_forecast(weather: dict[str, Any], lat: float, lon: float) -> ForecastResult:
    """Rate days, pick the best window, and recommend."""
    return build_forecast_result(weather, lat, lon, cached=True)


@task(name="build-html")
def build_html(result: ForecastResult, fetched_at: str = "") -> str:
    """Render the full page."""
    updated = ""
    if fetched_at:
        updated = datetime.fromisoformat(fetched_at).strftime("%Y-%m-%d %H:%M UTC")
    return build_page_html(result, updated=updated)


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@flow(name="build-site", log_prints=True)
def build_all(lat: float | None = None, lon: float | None = None) -> dict[str, Any]:
    """
    Build the static site for a location (default: configured location).
    """
    settings = get_settings()
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon

    print("Loading forecast...")
    weather = load_weather(lat, lon)
    if not weather:
        print("No forecast found. Run fetch flow first.")
        return {"error": "no data"}

    result = score_forecast(weather, lat, lon)
    print(f"Recommendation: {result.recommendation.message}")

    print("Building HTML...")
    html = build_html(result, store.fetched_at(forecast_path(lat, lon)))

    print("Writing site...")
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {
        "pages": 1,
        "output": str(output_path),
        "recommendation": result.recommendation.type.value,
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
