"""Validation of raw command-line values.

Each check is total: it either returns the normalized value or raises
`ValidationError`. `build_options` runs them in a fixed order (provider,
country, timeout, on-error) and stops at the first failure.
"""

from __future__ import annotations

import re

from core.domain.choices import (
    COUNTRIES,
    DEFAULT_SSH_TIMEOUT,
    PROVIDER_ALIASES,
    TIME_UNITS,
    OnErrorPolicy,
    Provider,
)
from core.domain.models import BuildOptions, RawOptions
from core.errors import ValidationError

_TIMEOUT_RE = re.compile(r"[0-9]+(?:" + "|".join(TIME_UNITS) + r")")


def validate_country(value: str | None) -> str | None:
    """Return the uppercase country code, or None when absent.

    None means "no lookup": the default mirror is used without a network
    round trip.
    """

    if value is None:
        return None
    code = value.strip().upper()
    if code not in COUNTRIES:
        raise ValidationError("country", value)
    return code


def validate_provider(value: str | None) -> Provider:
    if value is None:
        return Provider.default()
    provider = PROVIDER_ALIASES.get(value.strip().lower())
    if provider is None:
        raise ValidationError("provider", value)
    return provider


def validate_timeout(value: str | None) -> str:
    if value is None:
        return DEFAULT_SSH_TIMEOUT
    if not _TIMEOUT_RE.fullmatch(value):
        raise ValidationError("timeout", value)
    return value


def validate_on_error(value: str | None) -> OnErrorPolicy:
    if value is None:
        return OnErrorPolicy.default()
    try:
        return OnErrorPolicy(value.strip().lower())
    except ValueError:
        raise ValidationError("on-error", value) from None


def build_options(raw: RawOptions) -> BuildOptions:
    """Validate `raw` and build the immutable options for this run."""

    provider = validate_provider(raw.provider)
    country = validate_country(raw.country)
    ssh_timeout = validate_timeout(raw.timeout)
    on_error = validate_on_error(raw.on_error)

    return BuildOptions(
        country=country,
        provider=provider,
        ssh_timeout=ssh_timeout,
        write_zeros=not raw.skip_write_zeros,
        on_error=on_error,
        force=raw.force,
        dry_run=raw.dry_run,
        headless=raw.headless,
    )
