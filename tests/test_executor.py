from __future__ import annotations

import shlex

from conftest import FakeRunner
from core.domain.models import Invocation
from core.services.executor import execute, format_invocation

INVOCATION = Invocation(
    provider_filter="qemu",
    argv=(
        "packer",
        "build",
        "-only=qemu",
        "-on-error=ask",
        "-force",
        "-var",
        "iso_url=https://mirror.example.org/iso/latest/archlinux-2026.10.01-x86_64.iso",
        "-var",
        "country=DE",
        "arch-template.json",
    ),
    variables={
        "iso_url": "https://mirror.example.org/iso/latest/archlinux-2026.10.01-x86_64.iso",
        "country": "DE",
    },
    template="arch-template.json",
)


def test_format_invocation_is_line_continued() -> None:
    text = format_invocation(INVOCATION)

    lines = text.splitlines()
    assert lines[0] == "packer build \\"
    assert lines[-1] == "  arch-template.json"
    assert "  -var country=DE \\" in lines
    assert all(line.endswith(" \\") for line in lines[:-1])


def test_format_invocation_reparses_to_argv() -> None:
    text = format_invocation(INVOCATION).replace("\\\n", "")
    assert tuple(shlex.split(text)) == INVOCATION.argv


def test_dry_run_prints_and_does_not_execute() -> None:
    runner = FakeRunner()
    printed: list[str] = []

    code = execute(INVOCATION, runner, dry_run=True, echo=printed.append)

    assert code == 0
    assert runner.calls == []
    assert printed == [format_invocation(INVOCATION)]


def test_live_run_passes_exit_code_through() -> None:
    runner = FakeRunner(exit_code=3)

    code = execute(INVOCATION, runner)

    assert code == 3
    assert runner.calls == [INVOCATION.argv]
