"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirect policy for every lookup.
- Turns transport and status failures into `FetchError` so the core never
  sees httpx exceptions.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from core.config import AppSettings
from core.errors import FetchError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so mirror and manifest lookups behave the same.
    - `transport` lets tests plug in `httpx.MockTransport`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/plain,*/*;q=0.8",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxFetcher:
    """`TextFetcher` backed by a blocking httpx client."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def fetch_text(self, url: str, *, params: Mapping[str, str] | None = None) -> str:
        logger.debug("GET %s params=%s", url, dict(params or {}))
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"HTTP {exc.response.status_code} from {exc.request.url}",
                url=str(exc.request.url),
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"request to {url} failed: {exc}", url=url) from exc
        return response.text
