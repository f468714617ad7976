"""Command-line entry point for the dining simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import ParseError, parse_args
from .table import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run the simulation; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    Table(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())