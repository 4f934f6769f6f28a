"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .sorting import solve
from .validate import InputError, check_input, parse_arguments


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read integers from ``argv``, print one operation per line; 1 on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        check_input(args)
    except InputError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    operations = solve(parse_arguments(args))
    sys.stdout.write("".join(f"{name}\n" for name in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())