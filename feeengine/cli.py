"""Command that upper-cases everything read from standard input."""

from __future__ import annotations

import sys
from typing import Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read all of stdin and print it in upper case."""
    text = sys.stdin.read()
    print(text.upper())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())