import io
import random

import pytest

from pushswap.sorting import index_values, is_sorted, radix_sort
from pushswap.stacks import Stacks


def replay(values, ops):
    s = Stacks(values, out=io.StringIO())
    table = {"pa": s.pa, "pb": s.pb, "ra": s.ra, "rra": s.rra}
    for op in ops:
        table[op]()
    return s


def test_is_sorted():
    assert is_sorted([]) is True
    assert is_sorted([1, 1, 2]) is True
    assert is_sorted([3, 2]) is False


def test_index_values_pinned():
    assert index_values([30, 10, 20]) == [2, 0, 1]


@pytest.mark.parametrize("seed", range(5))
def test_index_values_is_rank_permutation(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), 40)
    ranks = index_values(values)
    assert sorted(ranks) == list(range(len(values)))
    ordered = [v for _, v in sorted(zip(ranks, values))]
    assert ordered == sorted(values)


@pytest.mark.parametrize("values", [[2, 1], [3, 1, 2], [5, 4, 3, 2, 1], [0, -7, 12, 4, 9, -1]])
def test_radix_sort_sorts(values):
    buf = io.StringIO()
    s = Stacks(values, out=buf)
    radix_sort(s)
    assert s.a == sorted(values)
    assert s.b == []
    ops = buf.getvalue().split()
    assert set(ops) <= {"pa", "pb", "ra", "rra"}
    assert replay(values, ops).a == sorted(values)


@pytest.mark.parametrize("seed", range(3))
def test_radix_sort_random(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-5000, 5000), 100)
    buf = io.StringIO()
    s = Stacks(values, out=buf)
    radix_sort(s)
    assert s.a == sorted(values)
    assert buf.getvalue().count("pb") == buf.getvalue().count("pa")


def test_radix_sort_empty_is_noop():
    buf = io.StringIO()
    s = Stacks([], out=buf)
    radix_sort(s)
    assert s.a == []
    assert buf.getvalue() == ""