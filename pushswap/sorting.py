"""Radix sort over the push_swap stacks."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, List

from pushswap.stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True when ``values`` are in non-decreasing order."""
    return all(first <= second for first, second in pairwise(values))


def index_values(values: Iterable[int]) -> List[int]:
    """Replace each value by its position in sorted order."""
    values = list(values)
    rank = {value: position for position, value in enumerate(sorted(values))}
    return [rank[value] for value in values]


def radix_sort(stacks: Stacks) -> None:
    """Sort ``stacks.a`` with ``b`` as scratch, one binary digit of the
    rank per pass, emitting each instruction used."""
    if not stacks.a:
        return
    rank = dict(zip(stacks.a, index_values(stacks.a)))
    max_bits = (len(stacks.a) - 1).bit_length()
    for bit in range(max_bits):
        rotations = 0
        for _ in range(len(stacks.a)):
            if (rank[stacks.a[0]] >> bit) & 1:
                stacks.ra()
                rotations += 1
            else:
                stacks.pb()
        for _ in range(rotations):
            stacks.rra()
        while stacks.b:
            stacks.pa()