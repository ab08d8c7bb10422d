"""Build resolution pipeline.

Ties the resolution stages together in their fixed order: mirror lookup,
manifest lookup, invocation assembly. Execution is left to the caller so the
HTTP client can be closed before the builder starts its long run.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import AppSettings
from core.domain.models import BuildOptions, Invocation, IsoManifest, MirrorInfo
from core.interfaces.fetcher import TextFetcher
from core.services.invocation import build_invocation
from core.services.media_resolver import resolve_media
from core.services.mirror_resolver import resolve_mirror


@dataclass
class BuildPlan:
    """Everything resolved for one run."""

    options: BuildOptions
    mirror: MirrorInfo
    media: IsoManifest
    invocation: Invocation


def resolve_plan(
    options: BuildOptions,
    fetcher: TextFetcher,
    settings: AppSettings,
) -> BuildPlan:
    """Resolve mirror and media for `options` and build the invocation.

    Fresh on every call: the installer is a rolling release, so nothing is
    cached between runs.
    """

    mirror = resolve_mirror(options.country, fetcher, settings)
    media = resolve_media(mirror, fetcher, settings)
    invocation = build_invocation(options, mirror, media, settings)
    return BuildPlan(options=options, mirror=mirror, media=media, invocation=invocation)
