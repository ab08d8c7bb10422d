"""HTTP fetch contract.

Why Protocol:
- The resolvers only need "give me the body of this URL"; they never see
  httpx, so tests can feed them fixture text.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class TextFetcher(Protocol):
    """Minimal contract for a blocking text download.

    Design rules:
    - Redirects are followed.
    - Any transport failure or non-2xx status raises `core.errors.FetchError`.
    """

    def fetch_text(self, url: str, *, params: Mapping[str, str] | None = None) -> str:
        """Return the decoded response body for `url`."""

        ...
