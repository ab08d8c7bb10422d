"""arch-box command line.

Parsing is a single typer command that only captures values (`RawOptions`);
validation, resolution and execution happen afterwards in `main`, which also
accepts injected fetcher/runner/settings for tests.
"""

import sys
from contextlib import ExitStack
from typing import Annotated, Optional, Sequence

import pydantic
import typer
from rich.console import Console
from rich.markup import escape

from adapters.http_client import HttpxFetcher, build_client
from adapters.process_runner import SubprocessRunner
from cli.ui_components import print_help, print_usage_error, print_validation_error
from core.config import AppSettings
from core.domain.models import RawOptions
from core.errors import ArchBoxError, ValidationError
from core.interfaces.fetcher import TextFetcher
from core.interfaces.runner import ProcessRunner
from core.logging_setup import configure_logging
from core.services.build_pipeline import resolve_plan
from core.services.executor import execute
from core.validators import build_options

app = typer.Typer(add_completion=False, help="Build an Arch Linux base box with Packer.")

_console = Console()
_err_console = Console(stderr=True)

# typer may ship its own click; take UsageError from the class typer raises.
_UsageError = next(cls for cls in reversed(typer.BadParameter.__mro__) if cls.__name__ == "UsageError")

_HELP_TOKENS = ("-h", "--help", "-?")
_VALUE_OPTIONS = ("-c", "--country", "-p", "--provider", "-t", "--timeout", "-o", "--on-error")


def _help_callback(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    print_help(_console)
    raise typer.Exit(code=0)


def _upper(value: Optional[str]) -> Optional[str]:
    return value.upper() if value is not None else None


@app.command(add_help_option=False)
def build(
    country: Annotated[
        Optional[str],
        typer.Option("-c", "--country", metavar="CODE", callback=_upper, help="Mirror country code."),
    ] = None,
    provider: Annotated[
        Optional[str],
        typer.Option("-p", "--provider", metavar="NAME", help="Virtualization backend."),
    ] = None,
    timeout: Annotated[
        Optional[str],
        typer.Option("-t", "--timeout", metavar="DURATION", help="SSH wait inside the guest."),
    ] = None,
    skip_write_zeros: Annotated[
        bool,
        typer.Option("-w", "--skip-write-zeros", help="Do not zero free disk space."),
    ] = False,
    on_error: Annotated[
        Optional[str],
        typer.Option("-o", "--on-error", metavar="ACTION", help="Builder behaviour on failure."),
    ] = None,
    force: Annotated[bool, typer.Option("-f", "--force", help="Delete previous artifacts.")] = False,
    dry_run: Annotated[bool, typer.Option("-d", "--dry-run", help="Print the command only.")] = False,
    headless: Annotated[bool, typer.Option("-e", "--headless", help="No VM console window.")] = False,
    show_help: Annotated[
        bool,
        typer.Option(
            "-h",
            "--help",
            "-?",
            is_eager=True,
            expose_value=False,
            callback=_help_callback,
            help="Show help and reference tables.",
        ),
    ] = False,
) -> RawOptions:
    """Capture the command line as raw options."""

    return RawOptions(
        country=country,
        provider=provider,
        timeout=timeout,
        on_error=on_error,
        skip_write_zeros=skip_write_zeros,
        force=force,
        dry_run=dry_run,
        headless=headless,
    )


def _cut_at_help(args: Sequence[str]) -> list[str]:
    """Drop everything after the first help flag so later tokens are never parsed."""

    expects_value = False
    for index, token in enumerate(args):
        if expects_value:
            expects_value = False
            continue
        if token == "--":
            break
        if token in _HELP_TOKENS:
            return list(args[: index + 1])
        expects_value = token in _VALUE_OPTIONS
    return list(args)


def parse_args(args: Sequence[str]) -> RawOptions | int:
    """Parse `args`; an int result is the exit code of a finished help request."""

    command = typer.main.get_command(app)
    result = command.main(args=_cut_at_help(args), prog_name="arch-box", standalone_mode=False)
    if isinstance(result, RawOptions):
        return result
    return int(result or 0)


def main(
    argv: Sequence[str] | None = None,
    *,
    fetcher: TextFetcher | None = None,
    runner: ProcessRunner | None = None,
    settings: AppSettings | None = None,
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        parsed = parse_args(args)
    except _UsageError as exc:
        print_usage_error(_err_console, exc.format_message())
        return 1
    if isinstance(parsed, int):
        return parsed

    try:
        settings = settings or AppSettings()
    except pydantic.ValidationError as exc:
        _err_console.print("[red]Error:[/red] invalid ARCH_BOX_* configuration", highlight=False)
        _err_console.print(escape(str(exc)), highlight=False)
        return 1
    configure_logging(settings.log_level)

    try:
        options = build_options(parsed)
        with ExitStack() as stack:
            if fetcher is None:
                client = stack.enter_context(build_client(settings))
                fetcher = HttpxFetcher(client)
            plan = resolve_plan(options, fetcher, settings)
        code = execute(
            plan.invocation,
            runner or SubprocessRunner(),
            dry_run=options.dry_run,
            echo=typer.echo,
        )
    except ValidationError as exc:
        print_validation_error(_err_console, exc)
        return exc.exit_code
    except ArchBoxError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        return exc.exit_code

    # Killed by a signal: report it the way a shell would.
    if code < 0:
        return 128 - code
    return code


def run() -> None:
    sys.exit(main())
