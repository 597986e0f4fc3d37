"""Run script.

Lets `python -m main` work from inside `src/` during development, alongside
the `patisserie` console script.
"""

from __future__ import annotations

import sys

# Avoid UnicodeEncodeError on Windows terminals (cp1252 vs utf-8) when pasting
# non-ASCII text or printing titles.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
