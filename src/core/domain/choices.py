"""Closed value sets for build options.

This module is the single source of truth for the allowed countries,
providers, time units and error policies. Validators use it to check input
and the CLI uses it to render the reference tables.
"""

from __future__ import annotations

from enum import Enum


class Provider(str, Enum):
    """Canonical builder profiles declared by the template."""

    VIRTUALBOX = "virtualbox-iso"
    QEMU = "qemu"
    VMWARE = "vmware-iso"
    PARALLELS = "parallels-iso"

    @classmethod
    def default(cls) -> "Provider":
        return cls.VIRTUALBOX

    def label(self) -> str:
        return _PROVIDER_LABELS[self]


class OnErrorPolicy(str, Enum):
    """What the builder does when a build step fails."""

    CLEANUP = "cleanup"
    ABORT = "abort"
    ASK = "ask"

    @classmethod
    def default(cls) -> "OnErrorPolicy":
        return cls.CLEANUP

    def label(self) -> str:
        return _POLICY_LABELS[self]


_PROVIDER_LABELS: dict[Provider, str] = {
    Provider.VIRTUALBOX: "Oracle VirtualBox",
    Provider.QEMU: "QEMU/KVM (libvirt)",
    Provider.VMWARE: "VMware Workstation/Fusion",
    Provider.PARALLELS: "Parallels Desktop",
}

_POLICY_LABELS: dict[OnErrorPolicy, str] = {
    OnErrorPolicy.CLEANUP: "clean up all partial artifacts (default)",
    OnErrorPolicy.ABORT: "stop immediately and keep everything for debugging",
    OnErrorPolicy.ASK: "prompt for what to do",
}

# User spellings, lowercase. Canonical ids map to themselves.
PROVIDER_ALIASES: dict[str, Provider] = {
    "virtualbox": Provider.VIRTUALBOX,
    "vbox": Provider.VIRTUALBOX,
    "virtualbox-iso": Provider.VIRTUALBOX,
    "qemu": Provider.QEMU,
    "libvirt": Provider.QEMU,
    "kvm": Provider.QEMU,
    "vmware": Provider.VMWARE,
    "vmware-iso": Provider.VMWARE,
    "parallels": Provider.PARALLELS,
    "parallels-iso": Provider.PARALLELS,
}

TIME_UNITS: dict[str, str] = {
    "ns": "nanoseconds",
    "us": "microseconds",
    "ms": "milliseconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
}

DEFAULT_SSH_TIMEOUT = "20m"

# Countries with mirrors known to the Arch Linux mirror directory.
COUNTRIES: dict[str, str] = {
    "AT": "Austria",
    "AU": "Australia",
    "BD": "Bangladesh",
    "BE": "Belgium",
    "BG": "Bulgaria",
    "BR": "Brazil",
    "BY": "Belarus",
    "CA": "Canada",
    "CH": "Switzerland",
    "CL": "Chile",
    "CN": "China",
    "CO": "Colombia",
    "CZ": "Czechia",
    "DE": "Germany",
    "DK": "Denmark",
    "EC": "Ecuador",
    "EE": "Estonia",
    "ES": "Spain",
    "FI": "Finland",
    "FR": "France",
    "GB": "United Kingdom",
    "GR": "Greece",
    "HK": "Hong Kong",
    "HR": "Croatia",
    "HU": "Hungary",
    "ID": "Indonesia",
    "IE": "Ireland",
    "IL": "Israel",
    "IN": "India",
    "IR": "Iran",
    "IS": "Iceland",
    "IT": "Italy",
    "JP": "Japan",
    "KR": "South Korea",
    "KZ": "Kazakhstan",
    "LT": "Lithuania",
    "LU": "Luxembourg",
    "LV": "Latvia",
    "MK": "North Macedonia",
    "NC": "New Caledonia",
    "NL": "Netherlands",
    "NO": "Norway",
    "NZ": "New Zealand",
    "PH": "Philippines",
    "PL": "Poland",
    "PT": "Portugal",
    "RO": "Romania",
    "RS": "Serbia",
    "RU": "Russia",
    "SE": "Sweden",
    "SG": "Singapore",
    "SI": "Slovenia",
    "SK": "Slovakia",
    "TR": "Turkey",
    "TW": "Taiwan",
    "UA": "Ukraine",
    "US": "United States",
    "VN": "Vietnam",
    "ZA": "South Africa",
}
