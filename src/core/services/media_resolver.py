"""Installer media resolution from a mirror's checksum manifest."""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase

from core.config import AppSettings
from core.domain.models import IsoManifest, MirrorInfo
from core.errors import FetchError
from core.interfaces.fetcher import TextFetcher

logger = logging.getLogger(__name__)


def pick_iso_name(manifest: str, extension: str = "iso") -> str | None:
    """Return the installer filename listed on the last matching line.

    Lines look like `<hash>  <filename>` (a `*` before the filename marks
    binary mode). When several lines match, the later one is authoritative.
    """

    pattern = f"*-x86_64.{extension}"
    selected = None
    for raw_line in manifest.splitlines():
        fields = raw_line.split()
        if not fields:
            continue
        name = fields[-1].lstrip("*")
        if fnmatchcase(name, pattern):
            selected = name
    return selected


def resolve_media(
    mirror: MirrorInfo,
    fetcher: TextFetcher,
    settings: AppSettings,
) -> IsoManifest:
    base = f"{mirror.url}/{settings.iso_path.strip('/')}"
    checksum_url = f"{base}/{settings.manifest_name}"

    body = fetcher.fetch_text(checksum_url)
    if not body.strip():
        raise FetchError("checksum manifest is empty", url=checksum_url)

    iso_name = pick_iso_name(body, settings.iso_extension)
    if iso_name is None:
        raise FetchError(
            f"no *-x86_64.{settings.iso_extension} entry in checksum manifest",
            url=checksum_url,
        )

    iso_url = f"{base}/{iso_name}"
    logger.info("Resolved installer media: %s", iso_url)
    return IsoManifest(checksum_url=checksum_url, iso_name=iso_name, iso_url=iso_url)
