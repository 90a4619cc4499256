"""Turn upstream weather payloads into scored, renderable results.

Dependency rule: analysis/ imports from scoring/ and schemas only. It
never fetches data, touches the store, or produces HTML.

Modules:
  - forecast: Pirate Weather payload -> ForecastDay list -> ForecastResult
"""

from tapping_time.analysis.forecast import (
    build_forecast_result,
    parse_current_conditions,
    parse_forecast_days,
)

__all__ = [
    "build_forecast_result",
    "parse_current_conditions",
    "parse_forecast_days",
]
