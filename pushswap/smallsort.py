"""Fixed move sequences for two to five numbers."""

from __future__ import annotations

from pushswap.stacks import (
    Stacks,
    highest_rank,
    is_rank_sorted,
    is_reverse_sorted,
    lowest_rank,
)


def sort_two(stacks: Stacks) -> None:
    """Swap stack a unless it is already in order."""
    if not is_rank_sorted(stacks.a, len(stacks.a)):
        stacks.swap("a")


def sort_three(stacks: Stacks) -> None:
    """Put three elements of stack a in order with at most two moves."""
    a = stacks.a
    if is_rank_sorted(a, len(a)):
        return
    lowest = lowest_rank(a)
    highest = highest_rank(a)
    if a[0].rank == lowest:
        stacks.reverse_rotate("a")
        stacks.swap("a")
    elif a[0].rank == highest:
        if a[1].rank == lowest:
            stacks.rotate("a")
        else:
            stacks.swap("a")
            stacks.reverse_rotate("a")
    elif a[1].rank == highest:
        stacks.reverse_rotate("a")
    else:
        stacks.swap("a")


def split_low_half(stacks: Stacks, length: int) -> None:
    """Look at the top of a five times, pushing ranks up to ``length // 2`` to b."""
    for _ in range(5):
        if stacks.a[0].rank <= length // 2:
            stacks.push("b")
        else:
            stacks.rotate("a")


def sort_four(stacks: Stacks) -> None:
    """Sort four elements of stack a."""
    a = stacks.a
    if is_reverse_sorted(a, len(a)):
        stacks.swap("a")
        stacks.reverse_rotate("a")
        stacks.reverse_rotate("a")
        stacks.swap("a")
        return
    if is_rank_sorted(a, len(a)):
        return
    split_low_half(stacks, len(a))
    if stacks.a:
        sort_two(stacks)
    if stacks.b:
        if not is_reverse_sorted(stacks.b, 2):
            stacks.swap("b")
        while stacks.b:
            stacks.push("a")


def sort_five_rest(stacks: Stacks) -> None:
    """Order ranks 3, 4 and 5 left on stack a."""
    a = stacks.a
    if is_rank_sorted(a, len(a)):
        return
    top, second = a[0].rank, a[1].rank
    if top == 4:
        if second == 5:
            stacks.reverse_rotate("a")
        else:
            stacks.swap("a")
    elif top == 5:
        if second == 3:
            stacks.rotate("a")
        else:
            stacks.swap("a")
            stacks.reverse_rotate("a")
    elif top == 3:
        stacks.swap("a")
        stacks.rotate("a")


def sort_decrease(stacks: Stacks) -> None:
    """Turn b holding ranks 1 then 2 into 2 then 1."""
    b = stacks.b
    if len(b) >= 2 and b[0].rank == 1 and b[1].rank == 2:
        stacks.reverse_rotate("b")


def sort_five(stacks: Stacks) -> None:
    """Sort five elements of stack a."""
    length = len(stacks.a)
    if is_rank_sorted(stacks.a, length):
        return
    split_low_half(stacks, length)
    if stacks.a:
        sort_five_rest(stacks)
    if stacks.b:
        sort_decrease(stacks)
    while stacks.b:
        stacks.push("a")