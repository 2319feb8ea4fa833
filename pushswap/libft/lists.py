"""A singly linked sequence of arbitrary items."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


class LinkedList:
    """An ordered collection that grows at either end and is read from the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: Deque[Any] = deque(items)

    def push_front(self, item: Any) -> None:
        """Insert ``item`` before the first element."""
        self._items.appendleft(item)

    def push_back(self, item: Any) -> None:
        """Append ``item`` after the last element."""
        self._items.append(item)

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove and return the first item.

        ``delete``, when given, is called on the item as it is removed.
        Raises IndexError when the list is empty.
        """
        if not self._items:
            raise IndexError("pop from an empty list")
        item = self._items.popleft()
        if delete is not None:
            delete(item)
        return item

    def last(self) -> Any:
        """Return the last item; IndexError when the list is empty."""
        if not self._items:
            raise IndexError("last of an empty list")
        return self._items[-1]

    def clear(self, delete: Deleter = None) -> None:
        """Remove every item, front first, calling ``delete`` on each."""
        while self._items:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item, front to back."""
        for item in self._items:
            func(item)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list holding ``func(item)`` for each item.

        If ``func`` raises, the items mapped so far are passed to ``delete``
        and the exception propagates; no partial list is returned.
        """
        mapped = LinkedList()
        try:
            for item in self._items:
                mapped.push_back(func(item))
        except Exception:
            mapped.clear(delete)
            raise
        return mapped

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"