"""Writing characters, strings, lines and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def write_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def write_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``."""
    _target(stream).write(text)


def write_line(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    _target(stream).write(text + "\n")


def write_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write ``number`` in decimal to ``stream``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    _target(stream).write(f"{number:d}")