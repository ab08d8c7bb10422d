"""Child process contract for the external builder."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ProcessRunner(Protocol):
    """Runs a command to completion and reports its exit status."""

    def run(self, argv: Sequence[str]) -> int:
        """Block until `argv` terminates and return its exit code unchanged."""

        ...
