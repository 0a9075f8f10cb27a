"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the given numbers.

    Returns 0 on success, or 1 after writing ``Error`` to stderr when the
    arguments are not a valid list of distinct integers.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args, limit_length=True)
        operations = solve(values)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())