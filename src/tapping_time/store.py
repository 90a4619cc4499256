"""JSON data store with freshness-aware caching.

Files are organized into two tiers:
  - live/: Upstream payloads with a short TTL (forecast per location, 3h)
  - derived/: Computed outputs, always rebuilt (the static site)

Every JSON file is wrapped in a metadata envelope with ``valid_until`` so
callers can serve a cached forecast instead of hitting the upstream API.
Forecasts are keyed by coordinates rounded to one decimal (~11 km), so
nearby requests share an entry.
"""

from __future__ import annotations

import json
import math
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Any

FORECAST_DIR = "live/forecast"


def round_coord(value: float) -> float:
    """Round a coordinate to one decimal place, halves toward +infinity."""
    return math.floor(value * 10 + 0.5) / 10


def forecast_path(lat: float, lon: float) -> Path:
    """Store-relative cache path for the forecast at a location."""
    return Path(FORECAST_DIR) / f"{round_coord(lat)}_{round_coord(lon)}.json"


class DataStore:
    """Manages read/write of cached JSON files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.live = base_dir / "live"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> dict[str, Any] | None:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``live/forecast/44.5_-73.2.json``).
            data: Payload to store under the ``data`` key.
            source: Data source identifier (e.g. ``"pirateweather.net"``).
            valid_until: Expiry timestamp. None means never fresh.
            **params: Extra metadata fields (location, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        # Readers only ever see a complete envelope
        fd, tmp_name = tempfile.mkstemp(dir=full.parent, prefix=f".{full.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(envelope, f, indent=2)
            os.replace(tmp_name, full)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        return full

    def fetched_at(self, path: Path) -> str:
        """``fetched_at`` timestamp of a stored file, or "" if unknown."""
        envelope = self.read_raw(path) or {}
        fetched: str = envelope.get("meta", {}).get("fetched_at", "")
        return fetched

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return False

        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry
