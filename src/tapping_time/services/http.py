"""
Shared HTTP client with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries transient
upstream failures (timeouts, connection resets, 429/502/503/504) with
exponential backoff. Weather fetches go through this session rather than
bare ``requests.get``.

Pirate Weather specifics: the API key is sent in the URL path, and the
free tier enforces a per-key call quota, answering 429 once it is spent.
A 429 is retried after the ``Retry-After`` delay when the response carries
one. A bad or revoked key answers 401/403, which is never retried, so the
caller sees the error right away.

Usage::

    from tapping_time.services.http import session

    resp = session.get("https://api.pirateweather.net/forecast/KEY/44.5,-73.2")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from tapping_time import __version__

USER_AGENT = f"tapping-time/{__version__}"

#: Forecast requests are cheap to repeat, so retry a few times quickly.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    respect_retry_after_header=True,
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout applied to every request that doesn't pass one.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Wrap send so every request gets a timeout unless the caller set one.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, shared by all datasources.
session: requests.Session = create_session()
