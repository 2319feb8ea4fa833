"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

import re
from typing import Union

CharLike = Union[int, str]

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _code(value: CharLike) -> int:
    """Return the character code of an int or a one-character string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return int(value)


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (int or str) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alnum(code: CharLike) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(code) or is_digit(code)


def is_alpha(code: CharLike) -> bool:
    """True for ASCII letters."""
    c = _code(code)
    return ord("a") <= c <= ord("z") or ord("A") <= c <= ord("Z")


def is_ascii(code: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(code) <= 127


def is_digit(code: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(code) <= ord("9")


def is_print(code: CharLike) -> bool:
    """True for printable ASCII characters (space through tilde)."""
    return 32 <= _code(code) <= 126


def to_lower(code: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; other values pass through."""
    c = _code(code)
    if ord("A") <= c <= ord("Z"):
        c += 32
    return _like(code, c)


def to_upper(code: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; other values pass through."""
    c = _code(code)
    if ord("a") <= c <= ord("z"):
        c -= 32
    return _like(code, c)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; no digits yields 0.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(number: int) -> str:
    """Render an integer in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return f"{number:d}"