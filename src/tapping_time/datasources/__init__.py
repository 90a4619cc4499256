"""External data source integrations.

Each subdirectory is one data source::

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs and constants
    └── {feature}.py      # Fetch functions (one per endpoint)

Fetch functions return the raw JSON dict and raise ``requests``
exceptions on failure. Turning payloads into domain objects is the job of
``analysis/``; deciding what a failure means to the caller is the job of
``services/forecast.py``.
"""
