"""
Prefect flows for the static site.

Flows:
- fetch: Download (or reuse cached) Pirate Weather forecast for the configured location
- build: Score the cached forecast and render the static site

Usage (local):
    python -m tapping_time.flows.fetch
    python -m tapping_time.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m tapping_time.flows.fetch
"""
