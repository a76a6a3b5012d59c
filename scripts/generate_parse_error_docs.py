#!/usr/bin/env python3
"""Regenerate the parse error list in README.md.

Replaces everything between the markers

    <!-- parse-error start -->
    <!-- parse-error end -->

with the Markdown list rendered from the rule catalog.

Exit Codes:
    0: File is up to date (or was updated)
    1: --check given and the file is out of date
    2: Markers not found

Python 3.13+. No external dependencies.
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from hastfromhtml.diagnostics.docs import render_rule_list

START = "<!-- parse-error start -->"
END = "<!-- parse-error end -->"

_ZONE = re.compile(re.escape(START) + r".*?" + re.escape(END), re.DOTALL)


def update(text: str) -> str | None:
    """Return ``text`` with the zone replaced, or None without markers."""
    if not _ZONE.search(text):
        return None
    body = f"{START}\n\n{render_rule_list()}\n{END}"
    return _ZONE.sub(lambda _: body, text, count=1)


def main(argv: list[str] | None = None) -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path", nargs="?", default="README.md", type=Path)
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the file would change",
    )
    args = parser.parse_args(argv)

    original = args.path.read_text(encoding="utf-8")
    updated = update(original)
    if updated is None:
        print(f"{args.path}: markers not found", file=sys.stderr)
        return 2

    if updated == original:
        print(f"{args.path}: up to date")
        return 0

    if args.check:
        print(f"{args.path}: parse error list is out of date", file=sys.stderr)
        return 1

    args.path.write_text(updated, encoding="utf-8")
    print(f"{args.path}: updated")
    return 0


if __name__ == "__main__":
    sys.exit(main())
