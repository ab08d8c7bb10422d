from __future__ import annotations

from typing import Mapping, Sequence

import pytest

from core.config import AppSettings
from core.errors import FetchError

MIRRORLIST_URL = "https://archlinux.org/mirrorlist/"

MIRRORLIST_DE = """\
##
## Arch Linux repository mirrorlist
## Filtered by mirror score from mirror status page
##

## Germany
#Server = https://ftp.halifax.rwth-aachen.de/archlinux/$repo/os/$arch
#Server = https://mirror.netcologne.de/archlinux/$repo/os/$arch
"""

MANIFEST = """\
0f1e2d3c4b5a69788796a5b4c3d2e1f00f1e2d3c4b5a69788796a5b4c3d2e1f0  archlinux-bootstrap-x86_64.tar.zst
a1b2c3d4e5f60718293a4b5c6d7e8f90a1b2c3d4e5f60718293a4b5c6d7e8f90  archlinux-2026.10.01-x86_64.iso
"""


class FakeFetcher:
    """Serves fixture bodies by URL and records every request."""

    def __init__(self, pages: Mapping[str, str] | None = None) -> None:
        self.pages = dict(pages or {})
        self.requests: list[tuple[str, dict[str, str]]] = []

    def fetch_text(self, url: str, *, params: Mapping[str, str] | None = None) -> str:
        self.requests.append((url, dict(params or {})))
        if url not in self.pages:
            raise FetchError(f"HTTP 404 from {url}", url=url)
        return self.pages[url]


class FakeRunner:
    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[tuple[str, ...]] = []

    def run(self, argv: Sequence[str]) -> int:
        self.calls.append(tuple(argv))
        return self.exit_code


@pytest.fixture
def settings() -> AppSettings:
    # _env_file=None keeps a developer's .env out of the tests.
    return AppSettings(_env_file=None)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(
        {
            MIRRORLIST_URL: MIRRORLIST_DE,
            "https://mirrors.kernel.org/archlinux/iso/latest/sha256sums.txt": MANIFEST,
            "https://ftp.halifax.rwth-aachen.de/archlinux/iso/latest/sha256sums.txt": MANIFEST,
        }
    )


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
