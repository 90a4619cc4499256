"""
Shared services.

- http.py     - requests.Session with retry/backoff and default timeout
- forecast.py - cache-aware forecast lookup used by the API and flows
"""
