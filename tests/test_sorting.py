import itertools
import random

import pytest

from pushswap.parsing import InputError
from pushswap.sorting import (
    butterfly,
    chunk_size,
    is_sorted,
    log_n,
    move_b_to_a,
    rank,
    root_n,
    solve,
    sort_five,
    sort_three,
)
from pushswap.stacks import Operation, Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for op in operations:
        stacks.apply(op)
    return stacks


def test_is_sorted_ascending():
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([]) is True
    assert is_sorted([5]) is True


def test_is_sorted_rejects_unordered_and_equal():
    assert is_sorted([2, 1, 3]) is False
    assert is_sorted([1, 1, 2]) is False


@pytest.mark.parametrize("k", [2, 3, 7, 22, 100])
def test_root_n_of_perfect_square(k):
    assert root_n(k * k) == k


@pytest.mark.parametrize("k", [2, 3, 10, 31])
def test_root_n_floors_between_squares(k):
    assert root_n(k * k + k) == k
    assert root_n((k + 1) * (k + 1) - 1) == k


@pytest.mark.parametrize("size", [0, 1])
def test_root_n_small_sizes(size):
    assert root_n(size) == -1


@pytest.mark.parametrize("k", [1, 2, 5, 10])
def test_log_n_powers_of_two(k):
    assert log_n(2**k) == k
    assert log_n(2 ** (k + 1) - 1) == k


def test_log_n_small():
    assert log_n(1) == 0
    assert log_n(0) == 0


@pytest.mark.parametrize("size", [6, 100, 500])
def test_chunk_size_combines_root_and_log(size):
    assert chunk_size(size) == root_n(size) + log_n(size)


def test_rank_is_permutation_of_positions():
    values = [42, -7, 1000, 3, 0]
    ranks = rank(values)
    assert sorted(ranks) == list(range(len(values)))
    assert [v for _, v in sorted(zip(ranks, values))] == sorted(values)


def test_rank_of_sorted_list():
    values = [-5, 0, 9, 12]
    assert rank(values) == list(range(len(values)))


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_permutations(perm):
    stacks = Stacks(perm)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.history) <= 2


def test_sort_three_single_swap():
    stacks = Stacks([2, 1, 3])
    sort_three(stacks)
    assert stacks.history == [Operation.SA]


def test_sort_three_needs_three_items():
    with pytest.raises(ValueError):
        sort_three(Stacks([2, 1]))


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3, 4, 5])))
def test_sort_five_all_permutations(perm):
    stacks = Stacks(perm)
    sort_five(stacks)
    assert stacks.is_solved()


@pytest.mark.parametrize("perm", list(itertools.permutations([10, 20, 30, 40])))
def test_sort_five_four_items(perm):
    stacks = Stacks(perm)
    sort_five(stacks)
    assert stacks.is_solved()
    assert stacks.history[-2:] == [Operation.PA, Operation.PA]


def test_move_b_to_a_builds_ascending_stack():
    stacks = Stacks([], [3, 1, 2, 5, 4])
    move_b_to_a(stacks)
    assert list(stacks.a) == [1, 2, 3, 4, 5]
    assert not stacks.b


def test_butterfly_sorts():
    rng = random.Random(7)
    values = rng.sample(range(-500, 500), 50)
    stacks = Stacks(values)
    butterfly(stacks, chunk_size(len(values)))
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(values)


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4]) == []
    assert solve([7]) == []


def test_solve_two_items():
    assert solve([2, 1]) == [Operation.SA]


def test_solve_rejects_duplicates():
    with pytest.raises(InputError):
        solve([3, 1, 3])


@pytest.mark.parametrize("size", [3, 4, 5, 6, 10, 100])
def test_solve_replay_sorts(size):
    rng = random.Random(size)
    values = rng.sample(range(-10_000, 10_000), size)
    operations = solve(values)
    stacks = _replay(values, operations)
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(values)


def test_solve_reverse_order():
    values = list(range(20, 0, -1))
    stacks = _replay(values, solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b