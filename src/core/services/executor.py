"""Executes (or prints) the builder invocation."""

from __future__ import annotations

import logging
import shlex
from typing import Callable

from core.domain.models import Invocation
from core.interfaces.runner import ProcessRunner

logger = logging.getLogger(__name__)

_CONTINUATION = " \\\n  "


def format_invocation(invocation: Invocation) -> str:
    """Render `invocation` as shell text that can be pasted back into a shell.

    The executable and subcommand share the first line; every option (a
    `-var` together with its value) gets its own continued line.
    """

    argv = list(invocation.argv)
    lines = [" ".join(shlex.quote(arg) for arg in argv[:2])]
    rest = iter(argv[2:])
    for arg in rest:
        if arg == "-var":
            lines.append(f"-var {shlex.quote(next(rest))}")
        else:
            lines.append(shlex.quote(arg))
    return _CONTINUATION.join(lines)


def execute(
    invocation: Invocation,
    runner: ProcessRunner,
    *,
    dry_run: bool = False,
    echo: Callable[[str], None] = print,
) -> int:
    """Dry run: print the command and return 0. Live run: the builder's exit code, verbatim."""

    if dry_run:
        echo(format_invocation(invocation))
        return 0

    logger.info("Starting %s (%s)", invocation.argv[0], invocation.provider_filter)
    code = runner.run(invocation.argv)
    logger.info("%s exited with status %d", invocation.argv[0], code)
    return code
