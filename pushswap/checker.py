"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .stacks import Operation, Stacks


def read_instructions(stream: Iterable[str]) -> list[Operation]:
    """Read one operation per newline-terminated line.

    A line that is not exactly an operation name followed by a newline,
    including a last line without its newline, raises ``InputError``.
    """
    operations: list[Operation] = []
    for line in stream:
        if not line.endswith("\n"):
            raise InputError()
        try:
            operations.append(Operation(line[:-1]))
        except ValueError:
            raise InputError() from None
    return operations


def run(values: Sequence[int], instructions: Iterable[Operation | str]) -> bool | None:
    """Apply ``instructions`` to a stack holding ``values``.

    Returns True when ``a`` ends sorted with ``b`` empty, False when not,
    and None when ``a`` ends empty, in which case there is no verdict.
    """
    stacks = Stacks(values)
    for instruction in instructions:
        stacks.apply(instruction)
    if not stacks.a:
        return None
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from stdin and print ``OK`` or ``KO`` for the numbers given.

    Returns 0 after a verdict, or 1 after writing ``Error`` to stderr for bad
    arguments or an unknown operation.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args, limit_length=False)
        instructions = read_instructions(sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    verdict = run(values, instructions)
    if verdict is not None:
        sys.stdout.write("OK\n" if verdict else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())