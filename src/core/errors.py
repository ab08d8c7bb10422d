"""Error taxonomy for arch-box.

Every error a run can end in carries the exit code the CLI reports. Failures
of the external builder are not errors here: its exit status is returned
verbatim.
"""

from __future__ import annotations


class ArchBoxError(Exception):
    """Base error; aborts the whole run."""

    exit_code: int = 1


class ValidationError(ArchBoxError):
    """A value falls outside its fixed grammar or allowed set."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"invalid {field}: {value!r}")
        self.field = field
        self.value = value


class FetchError(ArchBoxError):
    """Mirror directory or checksum manifest could not be resolved."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class BuilderUnavailableError(ArchBoxError):
    """The external builder binary is not installed."""

    exit_code = 127

    def __init__(self, binary: str) -> None:
        super().__init__(f"builder executable not found: {binary}")
        self.binary = binary
