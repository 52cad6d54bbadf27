"""Command-line entry point for the dining simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from symposium.dinner import Dinner
from symposium.parsing import ParseError, parse_arguments
from symposium.table import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the dinner and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_arguments(args)
    except ParseError as error:
        print(error)
        return 1
    Dinner(Table(config)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())