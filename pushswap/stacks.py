"""The two push_swap stacks and the instructions that act on them."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, List, Optional, TextIO

from pushswap.libft.output import write_str


def rotate(stack: List[int]) -> None:
    """Move the top element (index 0) to the bottom, in place."""
    if len(stack) < 2:
        return
    stack.append(stack.pop(0))


def reverse_rotate(stack: List[int]) -> None:
    """Move the bottom element to the top (index 0), in place."""
    if len(stack) < 2:
        return
    stack.insert(0, stack.pop())


def search_for_node(stack: List[int], value: int) -> int:
    """Return the position of ``value`` from the top.

    An empty stack gives -1; a value that is absent gives the stack's length.
    """
    if not stack:
        return -1
    try:
        return stack.index(value)
    except ValueError:
        return len(stack)


class Stacks:
    """Stacks ``a`` and ``b``, top first, with the push_swap instructions.

    Every instruction that takes effect writes its name to ``out``
    (standard output by default).
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a: List[int] = list(values)
        self.b: List[int] = []
        self._out = out

    def _emit(self, text: str) -> None:
        write_str(text, self._out)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if len(self.a) < 2:
            return
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if len(self.b) < 2:
            return
        self.b[0], self.b[1] = self.b[1], self.b[0]
        self._emit("sb")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._emit("pa\n")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._emit("pb\n")

    def ra(self) -> None:
        """Rotate ``a`` upwards."""
        rotate(self.a)
        self._emit("ra\n")

    def rb(self) -> None:
        """Rotate ``b`` upwards."""
        rotate(self.b)
        self._emit("rb\n")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        rotate(self.a)
        rotate(self.b)
        self._emit("rr\n")

    def rra(self) -> None:
        """Rotate ``a`` downwards."""
        reverse_rotate(self.a)
        self._emit("rra\n")

    def rrb(self) -> None:
        """Rotate ``b`` downwards."""
        reverse_rotate(self.b)
        self._emit("rrb\n")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        reverse_rotate(self.a)
        reverse_rotate(self.b)
        self._emit("rrr\n")

    def is_sorted(self) -> bool:
        """True when ``a`` is in non-decreasing order from the top."""
        return all(first <= second for first, second in pairwise(self.a))

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"