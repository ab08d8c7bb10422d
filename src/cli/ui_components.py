"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The reference tables are shown both by `--help` and next to validation
  errors, so they are built in one place.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.domain.choices import COUNTRIES, PROVIDER_ALIASES, TIME_UNITS, OnErrorPolicy, Provider
from core.errors import ValidationError

USAGE = (
    "Usage: arch-box [-c COUNTRY] [-p PROVIDER] [-t TIMEOUT] [-w] "
    "[-o ACTION] [-f] [-d] [-e] [-h]"
)

HELP_TEXT = """\
Build an Arch Linux base box with Packer.

The current installer ISO is located on every run: a mirror for COUNTRY is
looked up in the Arch Linux mirror directory, its checksum manifest is read
and the newest x86_64 image is passed to the builder together with the
options below.

Options:
  -c, --country CODE        mirror country (default: kernel.org mirror, US)
  -p, --provider NAME       virtualization backend (default: virtualbox-iso)
  -t, --timeout DURATION    how long to wait for SSH in the guest (default: 20m)
  -w, --skip-write-zeros    do not zero free disk space during cleanup
  -o, --on-error ACTION     what to do when a build step fails (default: cleanup)
  -f, --force               delete existing output artifacts before building
  -d, --dry-run             print the packer command instead of running it
  -e, --headless            run the VM without a console window
  -h, --help, -?            show this help and exit
"""


def build_countries_table() -> Table:
    table = Table(title="Countries")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Country", style="white")
    for code, name in COUNTRIES.items():
        table.add_row(code, name)
    return table


def build_providers_table() -> Table:
    table = Table(title="Providers")
    table.add_column("Provider", style="cyan", no_wrap=True)
    table.add_column("Aliases", style="white")
    table.add_column("Backend", style="dim")
    for provider in Provider:
        aliases = sorted(alias for alias, target in PROVIDER_ALIASES.items() if target is provider)
        table.add_row(provider.value, ", ".join(aliases), provider.label())
    return table


def build_time_units_table() -> Table:
    table = Table(title="Time units")
    table.add_column("Unit", style="cyan", no_wrap=True)
    table.add_column("Meaning", style="white")
    for unit, meaning in TIME_UNITS.items():
        table.add_row(unit, meaning)
    return table


def build_error_actions_table() -> Table:
    table = Table(title="Error actions")
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("Effect", style="white")
    for policy in OnErrorPolicy:
        table.add_row(policy.value, policy.label())
    return table


_TABLES_BY_FIELD = {
    "country": build_countries_table,
    "provider": build_providers_table,
    "timeout": build_time_units_table,
    "on-error": build_error_actions_table,
}


def print_help(console: Console) -> None:
    """Extended help followed by every reference table."""

    console.print(escape(HELP_TEXT), highlight=False)
    for builder in _TABLES_BY_FIELD.values():
        console.print(builder())


def print_usage_error(console: Console, message: str) -> None:
    console.print(escape(USAGE), highlight=False)
    console.print(f"[red]Error:[/red] {escape(message)}")


def print_validation_error(console: Console, error: ValidationError) -> None:
    """Name the offending value, then show what is allowed."""

    console.print(f"[red]Error:[/red] invalid {error.field} [bold]{escape(error.value)}[/bold]")
    if error.field == "timeout":
        console.print("Expected <number><unit>, e.g. 20m, 500ms, 1h.")
    builder = _TABLES_BY_FIELD.get(error.field)
    if builder is not None:
        console.print(builder())
