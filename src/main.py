"""Run script.

Why it exists:
- Lets you run the CLI with `python -m main` from inside `src/`.
- Keeps a plain entry point next to the `arch-box` console script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
