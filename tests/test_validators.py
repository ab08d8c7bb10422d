from __future__ import annotations

import pydantic
import pytest

from core.domain.choices import COUNTRIES, OnErrorPolicy, Provider
from core.domain.models import RawOptions
from core.errors import ValidationError
from core.validators import (
    build_options,
    validate_country,
    validate_on_error,
    validate_provider,
    validate_timeout,
)


@pytest.mark.parametrize("code", sorted(COUNTRIES))
def test_every_whitelisted_country_is_accepted_case_insensitively(code: str) -> None:
    assert validate_country(code.lower()) == code
    assert validate_country(code) == code


def test_absent_country_selects_default_mirror() -> None:
    assert validate_country(None) is None


@pytest.mark.parametrize("value", ["XX", "USA", "", "u s"])
def test_unknown_country_is_rejected(value: str) -> None:
    with pytest.raises(ValidationError) as info:
        validate_country(value)
    assert info.value.field == "country"
    assert info.value.value == value
    assert info.value.exit_code == 1


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        ("virtualbox", Provider.VIRTUALBOX),
        ("VBox", Provider.VIRTUALBOX),
        ("virtualbox-iso", Provider.VIRTUALBOX),
        ("libvirt", Provider.QEMU),
        ("QEMU", Provider.QEMU),
        ("vmware", Provider.VMWARE),
        ("vmware-iso", Provider.VMWARE),
        ("parallels", Provider.PARALLELS),
        ("Parallels-ISO", Provider.PARALLELS),
    ],
)
def test_provider_aliases(alias: str, expected: Provider) -> None:
    assert validate_provider(alias) is expected


def test_provider_defaults_to_virtualbox() -> None:
    assert validate_provider(None) is Provider.VIRTUALBOX


def test_unknown_provider_is_rejected() -> None:
    with pytest.raises(ValidationError) as info:
        validate_provider("hyperv")
    assert info.value.field == "provider"


@pytest.mark.parametrize("value", ["20m", "500ms", "1h", "30s", "0ns", "15us"])
def test_timeout_grammar_accepts(value: str) -> None:
    assert validate_timeout(value) == value


@pytest.mark.parametrize("value", ["20", "20x", "m20", "20 m", "-5m", "20m\n", ""])
def test_timeout_grammar_rejects(value: str) -> None:
    with pytest.raises(ValidationError):
        validate_timeout(value)


def test_timeout_defaults_to_twenty_minutes() -> None:
    assert validate_timeout(None) == "20m"


@pytest.mark.parametrize("value", ["cleanup", "ABORT", "Ask"])
def test_on_error_accepts_known_policies(value: str) -> None:
    assert validate_on_error(value) is OnErrorPolicy(value.lower())


def test_on_error_rejects_unknown_policy() -> None:
    with pytest.raises(ValidationError) as info:
        validate_on_error("retry")
    assert info.value.field == "on-error"


def test_build_options_defaults() -> None:
    options = build_options(RawOptions())

    assert options.country is None
    assert options.provider is Provider.VIRTUALBOX
    assert options.ssh_timeout == "20m"
    assert options.write_zeros is True
    assert options.on_error is OnErrorPolicy.CLEANUP
    assert not options.force
    assert not options.dry_run
    assert not options.headless


def test_skip_write_zeros_inverts_write_zeros() -> None:
    assert build_options(RawOptions(skip_write_zeros=True)).write_zeros is False


def test_validation_order_is_provider_first() -> None:
    raw = RawOptions(country="XX", provider="nope", timeout="bad", on_error="bad")
    with pytest.raises(ValidationError) as info:
        build_options(raw)
    assert info.value.field == "provider"


def test_validation_order_country_before_timeout() -> None:
    raw = RawOptions(country="XX", timeout="bad", on_error="bad")
    with pytest.raises(ValidationError) as info:
        build_options(raw)
    assert info.value.field == "country"


def test_build_options_is_frozen() -> None:
    options = build_options(RawOptions())
    with pytest.raises(pydantic.ValidationError):
        options.force = True  # type: ignore[misc]
