"""Strategies that sort stack ``a`` using the puzzle's operations."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .parsing import InputError, has_duplicates
from .stacks import Operation, Stacks


def is_sorted(values: Sequence[int]) -> bool:
    """True when ``values`` is strictly ascending; empty counts as sorted."""
    return all(x < y for x, y in zip(values, values[1:]))


def root_n(size: int) -> int:
    """Integer square root of ``size``, or ``-1`` when ``size`` is below 2."""
    if size < 2:
        return -1
    return math.isqrt(size)


def log_n(size: int) -> int:
    """How many times ``size`` can be halved before it drops to 1 or less."""
    if size <= 1:
        return 0
    return size.bit_length() - 1


def chunk_size(size: int) -> int:
    """Width of the window the butterfly pass pushes to ``b``."""
    return root_n(size) + log_n(size)


def rank(values: Sequence[int]) -> list[int]:
    """For each value, the number of values in ``values`` smaller than it."""
    ordered = sorted(values)
    positions: dict[int, int] = {}
    for position, value in enumerate(ordered):
        positions.setdefault(value, position)
    return [positions[value] for value in values]


def sort_three(stacks: Stacks) -> None:
    """Order the top three items of ``a`` with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three items on stack a")
    a1, a2, a3 = stacks.a[0], stacks.a[1], stacks.a[2]
    if a1 < a2 < a3:
        return
    if a1 > a2 > a3:
        stacks.ra()
        stacks.sa()
    elif a1 < a2 and a2 > a3 and a3 > a1:
        stacks.rra()
        stacks.sa()
    elif a1 > a2 and a2 < a3 and a3 > a1:
        stacks.sa()
    elif a1 > a2 and a2 < a3 and a3 < a1:
        stacks.ra()
    elif a1 < a2 and a2 > a3 and a3 < a1:
        stacks.rra()


def _move_to_b(stacks: Stacks, value: int) -> None:
    """Bring ``value`` to the top of ``a`` by the shorter way and push it."""
    length = len(stacks.a)
    position = stacks.a.index(value) + 1
    if length // 2 < position:
        for _ in range(length - position + 1):
            stacks.rra()
    else:
        for _ in range(position - 1):
            stacks.ra()
    stacks.pb()


def sort_five(stacks: Stacks) -> None:
    """Sort four or five items: park the smallest on ``b``, sort three, return."""
    moved = 0
    while moved < 2:
        if len(stacks.a) == 3:
            moved += 1
        else:
            _move_to_b(stacks, min(stacks.a))
        moved += 1
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def move_b_to_a(stacks: Stacks) -> None:
    """Return every item of ``b`` to ``a``, always the largest one first."""
    while stacks.b:
        largest = max(stacks.b)
        position = stacks.b.index(largest)
        if position <= len(stacks.b) // 2:
            while stacks.b[0] != largest:
                stacks.rb()
        else:
            while stacks.b[0] != largest:
                stacks.rrb()
        stacks.pa()


def butterfly(stacks: Stacks, n: int) -> None:
    """Push ``a`` to ``b`` in a window of ranks ``n`` wide, then pull it back.

    Items whose rank is already behind the window go to the bottom of ``b``,
    the rest to its top, so that ``b`` ends up roughly in descending order.
    """
    ranks = dict(zip(stacks.a, rank(list(stacks.a))))
    count = 0
    while stacks.a:
        index = ranks[stacks.a[0]]
        if index <= count:
            stacks.pb()
            stacks.rb()
            count += 1
        elif index <= count + n:
            stacks.pb()
            count += 1
        else:
            stacks.ra()
    move_b_to_a(stacks)


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort ``values`` in ascending order.

    Raises ``InputError`` when unsorted ``values`` contain a repeated number.
    """
    values = list(values)
    if is_sorted(values):
        return []
    if has_duplicates(values):
        raise InputError()
    stacks = Stacks(values)
    size = len(values)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_five(stacks)
    else:
        butterfly(stacks, chunk_size(size))
    return list(stacks.history)