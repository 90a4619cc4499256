"""
HTTP surface: one JSON endpoint plus the static page.

    GET /api/forecast?lat=..&lon=..   -> scored forecast (JSON)
    GET <anything else>               -> built site index.html

Errors are JSON ``{"error": ...}`` bodies: 400 for missing or invalid
coordinates, 500 when the API key is not configured, 502 when the
upstream weather API fails.
"""

from __future__ import annotations

import http.server
import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlparse

from pydantic import ValidationError

from tapping_time.schemas import Location
from tapping_time.services.forecast import ForecastError, get_forecast

logger = logging.getLogger(__name__)

API_FORECAST_PATH = "/api/forecast"

PLACEHOLDER_HTML = (
    "<!DOCTYPE html><html><head><title>Tapping Time</title></head>"
    "<body><p>Site not built yet. Run <code>tapping-time refresh</code>.</p></body></html>"
)


def parse_location(query: str) -> Location | None:
    """Parse ``lat``/``lon`` query parameters, or None if missing/invalid."""
    params = parse_qs(query)
    try:
        return Location(lat=params["lat"][0], lon=params["lon"][0])
    except (KeyError, IndexError, ValidationError):
        return None


def handle_forecast(query: str) -> tuple[int, dict[str, Any]]:
    """Answer a forecast API request as ``(status, body)``."""
    location = parse_location(query)
    if location is None:
        return 400, {"error": "Missing or invalid lat/lon parameters"}
    try:
        return 200, get_forecast(location.lat, location.lon)
    except ForecastError as e:
        return e.status, {"error": e.message}


class TappingTimeHandler(http.server.BaseHTTPRequestHandler):
    """Routes the forecast API and serves the static page for everything else."""

    site_dir: Path = Path("site")

    def do_GET(self) -> None:  # noqa: N802
        url = urlparse(self.path)
        if url.path == API_FORECAST_PATH:
            status, body = handle_forecast(url.query)
            self._send(status, json.dumps(body).encode(), "application/json")
            return

        index = self.site_dir / "index.html"
        html = index.read_bytes() if index.exists() else PLACEHOLDER_HTML.encode()
        self._send(200, html, "text/html;charset=UTF-8")

    def _send(self, status: int, body: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.info("%s - %s", self.address_string(), format % args)


def create_server(port: int, site_dir: Path) -> http.server.ThreadingHTTPServer:
    """Build a threaded server bound to all interfaces on ``port``."""
    handler = type("BoundHandler", (TappingTimeHandler,), {"site_dir": site_dir})
    return http.server.ThreadingHTTPServer(("", port), handler)
