"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction that rearranges the stacks, named as it is printed."""

    SA = "sa"
    SB = "sb"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of the operations done.

    Swaps on a stack of fewer than two items change nothing and are not
    recorded; pushes from an empty stack change nothing but are recorded.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> None:
        if source:
            target.appendleft(source.popleft())

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> None:
        if stack:
            stack.rotate(step)

    def sa(self) -> None:
        """Swap the two top items of ``a``."""
        if self._swap(self.a):
            self.history.append(Operation.SA)

    def sb(self) -> None:
        """Swap the two top items of ``b``."""
        if self._swap(self.b):
            self.history.append(Operation.SB)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a)
        self.history.append(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b)
        self.history.append(Operation.PB)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a, -1)
        self.history.append(Operation.RA)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b, -1)
        self.history.append(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks up."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self.history.append(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._rotate(self.a, 1)
        self.history.append(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._rotate(self.b, 1)
        self.history.append(Operation.RRB)

    def rrr(self) -> None:
        """Rotate both stacks down."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self.history.append(Operation.RRR)

    def apply(self, operation: Operation | str) -> None:
        """Perform an operation given as an ``Operation`` or its name.

        Raises ``ValueError`` for a name that is not an operation.
        """
        op = Operation(operation)
        getattr(self, op.value)()

    def is_solved(self) -> bool:
        """True when ``a`` is non-empty, strictly ascending and ``b`` is empty."""
        if not self.a or self.b:
            return False
        values = list(self.a)
        return all(x < y for x, y in zip(values, values[1:]))