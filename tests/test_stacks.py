import io

import pytest

from pushswap.stacks import Stacks, reverse_rotate, rotate, search_for_node


def make(values):
    buf = io.StringIO()
    return Stacks(values, out=buf), buf


def test_rotate_moves_top_to_bottom():
    values = [5, 7, 9]
    stack = list(values)
    rotate(stack)
    assert stack == values[1:] + values[:1]


def test_reverse_rotate_moves_bottom_to_top():
    values = [5, 7, 9]
    stack = list(values)
    reverse_rotate(stack)
    assert stack == values[-1:] + values[:-1]


@pytest.mark.parametrize("values", [[], [4], [1, 2], [3, 8, 6, 0]])
def test_rotate_round_trip(values):
    stack = list(values)
    rotate(stack)
    reverse_rotate(stack)
    assert stack == values


def test_search_for_node():
    stack = [4, 8, 15]
    assert search_for_node([], 4) == -1
    assert search_for_node(stack, 15) == stack.index(15)
    assert search_for_node(stack, 99) == len(stack)


def test_sa_swaps_without_newline():
    values = [2, 1, 3]
    s, buf = make(values)
    s.sa()
    assert s.a == [values[1], values[0], values[2]]
    assert buf.getvalue() == "sa"


def test_sa_on_single_element_is_silent():
    s, buf = make([1])
    s.sa()
    s.sb()
    assert s.a == [1]
    assert buf.getvalue() == ""


def test_push_moves_between_stacks():
    values = [3, 1, 2]
    s, buf = make(values)
    s.pb()
    s.pb()
    assert s.b == [values[1], values[0]]
    assert s.a == values[2:]
    s.pa()
    assert s.a == [values[1], values[2]]
    assert buf.getvalue() == "pb\npb\npa\n"


def test_push_from_empty_is_silent():
    s, buf = make([])
    s.pa()
    s.pb()
    assert (s.a, s.b) == ([], [])
    assert buf.getvalue() == ""


def test_rotations_always_print():
    s, buf = make([1])
    s.ra()
    s.rb()
    s.rr()
    s.rra()
    s.rrb()
    s.rrr()
    assert buf.getvalue() == "ra\nrb\nrr\nrra\nrrb\nrrr\n"
    assert s.a == [1]


def test_rr_and_rrr_are_inverse():
    s, _ = make([1, 2, 3, 4])
    s.pb()
    s.pb()
    before = (list(s.a), list(s.b))
    s.rr()
    s.rrr()
    assert (s.a, s.b) == before


def test_is_sorted():
    assert make([1, 2, 3])[0].is_sorted() is True
    assert make([2, 1, 3])[0].is_sorted() is False
    assert make([])[0].is_sorted() is True