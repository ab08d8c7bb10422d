"""Mirror resolution.

The Arch Linux mirror directory returns a pacman mirrorlist for a country:

    ## United States
    #Server = https://mirror.example.org/archlinux/$repo/os/$arch

The first server entry wins; the repository suffix is stripped so the
result points at the mirror root (where `iso/` lives).
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

from core.config import AppSettings
from core.domain.models import MirrorInfo
from core.errors import FetchError
from core.interfaces.fetcher import TextFetcher

logger = logging.getLogger(__name__)

_SERVER_RE = re.compile(r"^#?\s*Server\s*=\s*(?P<url>\S+)")
_REPO_SUFFIX_RE = re.compile(r"/\$repo(?:/.*)?$")


def parse_mirrorlist(text: str) -> str | None:
    """Return the base URL of the first usable server entry in `text`, if any.

    Entries that are not absolute http(s) URLs are skipped.
    """

    for raw_line in text.splitlines():
        match = _SERVER_RE.match(raw_line.strip())
        if not match:
            continue
        url = _REPO_SUFFIX_RE.sub("", match.group("url")).rstrip("/")
        parts = urlsplit(url)
        if parts.scheme in ("http", "https") and parts.netloc:
            return url
        logger.debug("Skipping unusable mirror entry %r", match.group("url"))
    return None


def resolve_mirror(
    country: str | None,
    fetcher: TextFetcher,
    settings: AppSettings,
) -> MirrorInfo:
    """Resolve the mirror for `country`.

    Rules:
    - No country: the configured default mirror, no network call.
    - Otherwise one request to the mirror directory (healthy HTTPS mirrors only).
    - No entries for the country is a `FetchError`; there is no fallback.
    """

    if country is None:
        logger.info("No country given, using default mirror %s", settings.default_mirror)
        return MirrorInfo(country=settings.default_country, url=settings.default_mirror.rstrip("/"))

    params = {
        "country": country,
        "protocol": "https",
        "ip_version": "4",
        "use_mirror_status": "on",
    }
    body = fetcher.fetch_text(settings.mirrorlist_url, params=params)
    url = parse_mirrorlist(body)
    if url is None:
        raise FetchError(
            f"no active mirror listed for country {country}",
            url=settings.mirrorlist_url,
        )

    logger.info("Resolved mirror for %s: %s", country, url)
    return MirrorInfo(country=country, url=url)
