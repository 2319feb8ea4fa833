"""Validation and parsing of the numbers given on the command line."""

from __future__ import annotations

import re
from typing import Iterable, List

_LEADING = re.compile(r"[\t\n\v\f\r ]*([+-]?)(.*)", re.DOTALL)
_DIGITS = re.compile(r"[0-9]+")
_MAX_BODY_LENGTH = 11


class InputError(ValueError):
    """Raised when an argument is not a valid number or is repeated."""


def parse_number(text: str) -> int:
    """Parse one argument as a whole decimal integer.

    Leading whitespace and a single sign are allowed. What follows the sign
    must be digits only, at most eleven characters long.
    """
    match = _LEADING.match(text)
    sign, body = match.group(1), match.group(2)
    if len(body) > _MAX_BODY_LENGTH:
        raise InputError(f"number too long: {text!r}")
    if not _DIGITS.fullmatch(body):
        raise InputError(f"not a number: {text!r}")
    value = int(body)
    return -value if sign == "-" else value


def check_args(args: Iterable[str]) -> List[int]:
    """Validate every argument and reject duplicates.

    Returns the parsed values in order.
    """
    values: List[int] = []
    seen = set()
    for text in args:
        value = parse_number(text)
        if value in seen:
            raise InputError(f"duplicate value: {text!r}")
        seen.add(value)
        values.append(value)
    return values


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Parse every argument into the list of values that fills the stack."""
    return [parse_number(text) for text in args]