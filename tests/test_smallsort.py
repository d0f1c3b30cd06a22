from itertools import permutations

import pytest

from pushswap.smallsort import (
    sort_decrease,
    sort_five,
    sort_five_rest,
    sort_four,
    sort_three,
    sort_two,
    split_low_half,
)
from pushswap.stacks import Stacks


def _ranks(stack):
    return [item.rank for item in stack]


def _replay(values, moves):
    stacks = Stacks(values)
    actions = {
        "sa": lambda: stacks.swap("a"),
        "sb": lambda: stacks.swap("b"),
        "pa": lambda: stacks.push("a"),
        "pb": lambda: stacks.push("b"),
        "ra": lambda: stacks.rotate("a"),
        "rb": lambda: stacks.rotate("b"),
        "rra": lambda: stacks.reverse_rotate("a"),
        "rrb": lambda: stacks.reverse_rotate("b"),
    }
    for move in moves:
        actions[move]()
    return stacks


def _scaled(perm):
    return [value * 10 - 25 for value in perm]


SORTERS = {2: sort_two, 3: sort_three, 4: sort_four, 5: sort_five}
CASES = [
    (size, perm)
    for size in SORTERS
    for perm in permutations(range(1, size + 1))
]


@pytest.mark.parametrize("size, perm", CASES)
def test_small_sorts_order_every_permutation(size, perm):
    values = _scaled(perm)
    stacks = Stacks(values)
    SORTERS[size](stacks)
    assert [item.value for item in stacks.a] == sorted(values)
    assert not stacks.b


@pytest.mark.parametrize("size, perm", CASES)
def test_recorded_moves_replay_to_same_result(size, perm):
    values = _scaled(perm)
    stacks = Stacks(values)
    SORTERS[size](stacks)
    replayed = _replay(values, stacks.moves)
    assert _ranks(replayed.a) == _ranks(stacks.a)
    assert _ranks(replayed.b) == _ranks(stacks.b)


@pytest.mark.parametrize("size", sorted(SORTERS))
def test_sorted_input_needs_no_moves(size):
    stacks = Stacks(range(size))
    SORTERS[size](stacks)
    assert not stacks.moves


def test_sort_three_reverse_example():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert stacks.moves == ["sa", "rra"]


def test_sort_four_reverse_example():
    stacks = Stacks([4, 3, 2, 1])
    sort_four(stacks)
    assert stacks.moves == ["sa", "rra", "rra", "sa"]


@pytest.mark.parametrize("perm", list(permutations(range(1, 6))))
def test_split_low_half_moves_low_ranks_to_b(perm):
    stacks = Stacks(perm)
    split_low_half(stacks, len(perm))
    low = {rank for rank in _ranks(Stacks(perm).a) if rank <= len(perm) // 2}
    assert set(_ranks(stacks.b)) == low
    assert set(_ranks(stacks.a)).isdisjoint(low)
    assert len(stacks.a) + len(stacks.b) == len(perm)


@pytest.mark.parametrize("perm", list(permutations([3, 4, 5])))
def test_sort_five_rest_orders_upper_ranks(perm):
    stacks = Stacks([1, 2, *perm])
    stacks.push("b")
    stacks.push("b")
    sort_five_rest(stacks)
    assert _ranks(stacks.a) == sorted(perm)


def test_sort_decrease_reverses_ascending_pair():
    stacks = Stacks([2, 1, 3])
    stacks.push("b")
    stacks.push("b")
    stacks.moves.clear()
    sort_decrease(stacks)
    assert stacks.moves == ["rrb"]
    assert _ranks(stacks.b) == sorted(_ranks(stacks.b), reverse=True)


def test_sort_decrease_leaves_descending_pair():
    stacks = Stacks([1, 2, 3])
    stacks.push("b")
    stacks.push("b")
    before = _ranks(stacks.b)
    stacks.moves.clear()
    sort_decrease(stacks)
    assert not stacks.moves
    assert _ranks(stacks.b) == before


def test_sort_two_on_unsorted_pair_swaps():
    stacks = Stacks([8, -3])
    sort_two(stacks)
    assert [item.value for item in stacks.a] == [-3, 8]
    assert len(stacks.moves) == 1