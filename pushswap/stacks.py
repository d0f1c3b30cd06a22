"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise


@dataclass
class Element:
    """One number on a stack, with its rank among all the numbers (1 is the smallest)."""

    value: int
    rank: int = 1


def assign_ranks(elements: Iterable[Element]) -> None:
    """Set each element's rank to one plus the number of strictly smaller values."""
    items = list(elements)
    ordered = sorted(item.value for item in items)
    for item in items:
        item.rank = 1 + bisect_left(ordered, item.value)


class Stacks:
    """Stacks ``a`` and ``b`` (index 0 is the top) and the moves made so far."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Element] = deque(Element(value) for value in values)
        self.b: deque[Element] = deque()
        self.moves: list[str] = []
        assign_ranks(self.a)

    def _stack(self, which: str) -> deque[Element]:
        if which == "a":
            return self.a
        if which == "b":
            return self.b
        raise ValueError(f"unknown stack {which!r}")

    def swap(self, which: str) -> None:
        """Exchange the two top elements of the named stack."""
        stack = self._stack(which)
        if len(stack) < 2:
            raise ValueError("swap needs at least two elements")
        stack[0], stack[1] = stack[1], stack[0]
        self.moves.append("s" + which)

    def push(self, to: str) -> None:
        """Move the top of the other stack onto stack ``to``.

        The move is recorded even when the other stack is empty.
        """
        target = self._stack(to)
        source = self.b if target is self.a else self.a
        if source:
            target.appendleft(source.popleft())
        self.moves.append("p" + to)

    def rotate(self, which: str) -> None:
        """Move the top element to the bottom; nothing happens below two elements."""
        stack = self._stack(which)
        if len(stack) < 2:
            return
        stack.rotate(-1)
        self.moves.append("r" + which)

    def reverse_rotate(self, which: str) -> None:
        """Move the bottom element to the top; nothing happens below two elements."""
        stack = self._stack(which)
        if len(stack) < 2:
            return
        stack.rotate(1)
        self.moves.append("rr" + which)


def lowest_rank(stack: Sequence[Element]) -> int:
    """Smallest rank on the stack."""
    return min(item.rank for item in stack)


def highest_rank(stack: Sequence[Element]) -> int:
    """Largest rank on the stack."""
    return max(item.rank for item in stack)


def last_rank(stack: Sequence[Element]) -> int:
    """Rank of the bottom element."""
    return stack[-1].rank


def is_reverse_sorted(stack: Sequence[Element], length: int) -> bool:
    """True if the stack holds ``length`` elements in strictly decreasing rank."""
    if not stack:
        return False
    descents = 1 + sum(1 for upper, lower in pairwise(stack) if upper.rank > lower.rank)
    return len(stack) == length == descents


def is_rank_sorted(stack: Sequence[Element], length: int) -> bool:
    """True if the stack holds ``length`` elements in ascending rank order."""
    size = len(stack)
    counter = 1
    for upper, lower in pairwise(stack):
        if upper.rank + 1 == lower.rank or (size == length and upper.rank == counter):
            counter += 1
    return size == length == counter


def describe(stack: Sequence[Element]) -> str:
    """A readable listing of the stack's size, values and ranks."""
    lines = [f"range = {len(stack)}"]
    lines.extend(f"value in chain = {item.value} ranking = {item.rank}" for item in stack)
    return "\n".join(lines) + "\n"