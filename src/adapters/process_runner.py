"""Runs the external image builder as a child process."""

from __future__ import annotations

import shutil
import subprocess
from typing import Sequence

from core.errors import BuilderUnavailableError


class SubprocessRunner:
    """`ProcessRunner` on top of `subprocess.run`.

    The child inherits stdin/stdout/stderr so the builder's own progress
    output (and `-on-error=ask` prompts) reach the user directly.
    """

    def run(self, argv: Sequence[str]) -> int:
        executable = shutil.which(argv[0])
        if executable is None:
            raise BuilderUnavailableError(argv[0])
        completed = subprocess.run([executable, *argv[1:]], check=False)
        return completed.returncode
