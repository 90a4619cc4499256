"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

# Pirate Weather icon codes (https://docs.pirateweather.net/en/latest/API/#icon)
ICON_LABELS: dict[str, str] = {
    "clear-day": "☀️ Clear",
    "clear-night": "\U0001f319 Clear",
    "partly-cloudy-day": "⛅ Partly Cloudy",
    "partly-cloudy-night": "☁️ Partly Cloudy",
    "cloudy": "☁️ Cloudy",
    "fog": "\U0001f32b️ Fog",
    "wind": "\U0001f32c️ Windy",
    "rain": "\U0001f327️ Rain",
    "sleet": "\U0001f9ca Sleet",
    "snow": "\U0001f328️ Snow",
}


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def format_temp(celsius: float | None) -> str:
    """Display a temperature as ``-3°C / 27°F``, or ``--`` when unknown."""
    if celsius is None:
        return "--"
    return f"{round(celsius)}°C / {round(c_to_f(celsius))}°F"


def icon_to_label(icon: str) -> str:
    """Convert a Pirate Weather icon code to a display label."""
    if not icon:
        return ""
    return ICON_LABELS.get(icon, icon.replace("-", " ").title())
