"""Builder invocation assembly.

Pure: no I/O, same inputs always give the same `Invocation`. The variable
names are the ones `arch-template.json` declares; the provider filter picks
one of its four builders.
"""

from __future__ import annotations

from core.config import AppSettings
from core.domain.models import BuildOptions, Invocation, IsoManifest, MirrorInfo


def _flag(value: bool) -> str:
    return "true" if value else "false"


def template_variables(options: BuildOptions, mirror: MirrorInfo, media: IsoManifest) -> dict[str, str]:
    return {
        "iso_url": media.iso_url,
        "iso_checksum_url": media.checksum_url,
        "ssh_timeout": options.ssh_timeout,
        "country": mirror.country,
        "write_zeros": _flag(options.write_zeros),
        "headless": _flag(options.headless),
    }


def build_invocation(
    options: BuildOptions,
    mirror: MirrorInfo,
    media: IsoManifest,
    settings: AppSettings,
) -> Invocation:
    provider_filter = options.provider.value
    variables = template_variables(options, mirror, media)

    argv = [
        settings.builder_binary,
        "build",
        f"-only={provider_filter}",
        f"-on-error={options.on_error.value}",
    ]
    if options.force:
        argv.append("-force")
    for name, value in variables.items():
        argv.extend(["-var", f"{name}={value}"])
    argv.append(settings.template_path)

    return Invocation(
        provider_filter=provider_filter,
        argv=tuple(argv),
        variables=variables,
        template=settings.template_path,
    )
