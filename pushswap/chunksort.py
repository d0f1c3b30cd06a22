"""Chunk-based sorting for medium inputs and a radix sort for large ones."""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial

from pushswap.smallsort import sort_five, sort_four, sort_three, sort_two
from pushswap.stacks import Element, Stacks, is_reverse_sorted, last_rank

RADIX_THRESHOLD = 300
_UPPER_PERCENT = 66
_LOWER_PERCENT = 33


def _threshold(total: int, percent: int) -> int:
    return total * percent // 100


def first_sort(stacks: Stacks, total: int) -> None:
    """Keep the upper third on a and spread the lower two thirds over b."""
    upper = _threshold(total, _UPPER_PERCENT)
    third = total // 3
    for _ in range(total):
        if stacks.a[0].rank >= upper:
            stacks.rotate("a")
            continue
        stacks.push("b")
        b = stacks.b
        if len(b) < 2:
            continue
        if b[0].rank >= third and third < b[0].rank < b[1].rank:
            stacks.swap("b")
        if b[0].rank < third + 1:
            stacks.rotate("b")


def sort_high(stacks: Stacks, total: int) -> None:
    """Push everything but the three highest ranks to b, then order those three."""
    while len(stacks.a) > 3:
        if stacks.a[0].rank >= total - 2:
            stacks.rotate("a")
        else:
            stacks.push("b")
    sort_three(stacks)


def count_above(stacks: Stacks, total: int, percent: int) -> int:
    """Half the number of leading elements of b (bottom excluded) at or above the threshold."""
    threshold = _threshold(total, percent)
    leading = 0
    for item in list(stacks.b)[:-1]:
        if item.rank < threshold:
            break
        leading += 1
    return leading // 2


def next_rank(stack: Sequence[Element], total: int) -> int:
    """Length of the ascending run of ranks that ends at the rank ``total``."""
    items = list(stack)
    index = next((i for i, item in enumerate(items) if item.rank == total), len(items) - 1)
    while index > 0 and items[index].rank == items[index - 1].rank + 1:
        index -= 1
    return total - items[index].rank + 1


def base_sort(stacks: Stacks, total: int, percent: int) -> None:
    """Make one move bringing the next wanted rank of b into place on a."""
    a, b = stacks.a, stacks.b
    wanted = total - next_rank(a, total)
    if a[1].rank == wanted - 1 and a[0].rank == wanted:
        stacks.swap("a")
    elif last_rank(a) == wanted:
        stacks.reverse_rotate("a")
    elif (
        b[0].rank == _threshold(total, percent) or b[0].rank == last_rank(a) + 1
    ) and b[0].rank != wanted:
        stacks.push("a")
        stacks.rotate("a")
    elif b[0].rank == wanted:
        stacks.push("a")
    else:
        stacks.rotate("b")


def search_distance(stacks: Stacks, target: int, forward: bool) -> int:
    """Steps through b to reach ``target`` from the top (forward) or the bottom.

    A missing target counts as the full length of b less one.
    """
    ranks = [item.rank for item in stacks.b]
    if not ranks:
        raise ValueError("stack b is empty")
    ordered = ranks if forward else ranks[::-1]
    return next((i for i, rank in enumerate(ordered) if rank == target), len(ranks) - 1)


def bring_and_push(stacks: Stacks, target: int, reverse: bool) -> None:
    """Rotate b until ``target`` is on top, push it to a and, if it follows a's bottom, rotate a."""
    b = stacks.b
    if not b:
        raise ValueError("stack b is empty")
    if reverse:
        if all(item.rank != target for item in b):
            raise ValueError(f"rank {target} is not on stack b")
        while b[0].rank != target:
            stacks.reverse_rotate("b")
    else:
        while len(b) > 1 and b[0].rank != target:
            stacks.rotate("b")
    stacks.push("a")
    if stacks.a[0].rank == last_rank(stacks.a) + 1:
        stacks.rotate("a")


def _cheapest(stacks: Stacks, target: int) -> tuple[int, bool]:
    forward = search_distance(stacks, target, True)
    backward = search_distance(stacks, target, False)
    if forward > backward:
        return backward, True
    return forward, False


def road(stacks: Stacks) -> None:
    """Fetch from b whichever neighbour of a's ends is cheaper to reach."""
    after_bottom = last_rank(stacks.a) + 1
    before_top = stacks.a[0].rank - 1
    bottom_cost, bottom_reverse = _cheapest(stacks, after_bottom)
    top_cost, top_reverse = _cheapest(stacks, before_top)
    if bottom_cost + 3 < top_cost:
        bring_and_push(stacks, after_bottom, bottom_reverse)
    else:
        bring_and_push(stacks, before_top, top_reverse)


def _restore_bottom(stacks: Stacks, total: int) -> None:
    while last_rank(stacks.a) != total:
        stacks.reverse_rotate("a")


def sort_end(stacks: Stacks, total: int, percent: int) -> None:
    """Move the chunk of b at or above ``percent`` of the ranks back onto a."""
    threshold = _threshold(total, percent)
    b = stacks.b
    remaining = count_above(stacks, total, percent)
    while b and b[0].rank >= threshold and remaining >= 0:
        base_sort(stacks, total, percent)
        remaining -= 1
    while b and (b[0].rank >= threshold or last_rank(b) >= threshold):
        road(stacks)
    _restore_bottom(stacks, total)


def sort_final(stacks: Stacks, total: int) -> None:
    """Move everything left on b back onto a."""
    while stacks.b:
        road(stacks)
    _restore_bottom(stacks, total)


def sort_medium(stacks: Stacks) -> None:
    """Sort stack a in three chunks."""
    total = len(stacks.a)
    first_sort(stacks, total)
    sort_high(stacks, total)
    stages = (
        partial(sort_end, stacks, total, _UPPER_PERCENT),
        partial(sort_end, stacks, total, _LOWER_PERCENT),
        partial(sort_final, stacks, total),
    )
    for stage in stages:
        if is_reverse_sorted(stacks.b, len(stacks.b)):
            while stacks.b:
                stacks.push("a")
        else:
            stage()


def radix_sort(stacks: Stacks) -> None:
    """Sort stack a bit by bit on the ranks."""
    bits = len(stacks.a).bit_length()
    for bit in range(bits):
        for _ in range(len(stacks.a)):
            if (stacks.a[0].rank >> bit) & 1:
                stacks.rotate("a")
            else:
                stacks.push("b")
        for _ in range(len(stacks.b)):
            if (stacks.b[0].rank >> bit) & 1:
                stacks.push("a")
            else:
                stacks.rotate("b")
    while stacks.b:
        stacks.push("a")


_SMALL_SORTS = {2: sort_two, 3: sort_three, 4: sort_four, 5: sort_five}


def sort(stacks: Stacks) -> None:
    """Sort stack a with the method suited to its size."""
    length = len(stacks.a)
    if length < 2:
        return
    small = _SMALL_SORTS.get(length)
    if small is not None:
        small(stacks)
    elif length < RADIX_THRESHOLD:
        sort_medium(stacks)
    else:
        radix_sort(stacks)