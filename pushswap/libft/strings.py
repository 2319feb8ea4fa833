"""String helpers: splitting, searching, bounded copies and trimming."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple

_NUL = "\0"


def _check_char(char: str, what: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"{what} must be a single character, got {char!r}")


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative")


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    _check_char(separator, "separator")
    return [word for word in text.split(separator) if word]


def find_char(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(char, "char")
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def find_last_char(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(char, "char")
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def duplicate(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def iterate_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each element of ``chars``.

    A non-None result replaces the element in place.
    """
    for index, char in enumerate(chars):
        result = func(index, char)
        if result is not None:
            chars[index] = result


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def bounded_concat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` so the result fits a buffer of ``size``
    (terminator included).

    Returns the resulting string and the length the full result would need.
    """
    _check_non_negative(size, "size")
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` so it fits a buffer of ``size`` (terminator included).

    Returns the copied string and the full length of ``src``.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def compare(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the first unequal pair of character codes,
    or 0 when the compared parts are equal.
    """
    _check_non_negative(count, "count")
    pairs = zip_longest(first[:count], second[:count], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def find_bounded(haystack: str, needle: str, count: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``count`` characters of
    ``haystack``; return its index or None. An empty needle is found at 0."""
    _check_non_negative(count, "count")
    if not needle:
        return 0
    index = haystack.find(needle, 0, count)
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Strip characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, count: int) -> str:
    """Return up to ``count`` characters of ``text`` from ``start``; empty
    when ``start`` is past the end."""
    _check_non_negative(start, "start")
    _check_non_negative(count, "count")
    if start >= len(text):
        return ""
    return text[start:start + count]