"""A small printf supporting the %c %s %p %d %i %u %x %X conversions."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TextIO, Union

from pushswap.libft.chars import itoa
from pushswap.libft.output import write_str

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1


def _to_int32(number: int) -> int:
    """Wrap ``number`` into the signed 32-bit range."""
    half = 1 << (_INT_BITS - 1)
    return ((int(number) + half) & _UINT_MASK) - half


def format_char(char: Union[str, int]) -> str:
    """Render a single character given as a one-character string or a code."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    return chr(int(char) & 0xFF)


def format_str(text: Optional[str]) -> str:
    """Render a string; a missing string is shown as ``(null)``."""
    if text is None:
        return "(null)"
    return str(text)


def format_int(number: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    return itoa(_to_int32(number))


def format_unsigned(number: int) -> str:
    """Render an unsigned 32-bit integer in decimal."""
    return itoa(int(number) & _UINT_MASK)


def format_hex(number: int, uppercase: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    value = int(number) & _UINT_MASK
    return f"{value:X}" if uppercase else f"{value:x}"


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` and lower-case hex; a null address is ``(nil)``."""
    if not address:
        return "(nil)"
    return f"0x{int(address) & _POINTER_MASK:x}"


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def sprintf(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the text.

    A ``%`` followed by anything other than a known conversion yields a
    single ``%`` and the following character is dropped, so ``%%`` gives
    ``%``. Missing arguments raise ValueError; extra ones are ignored.
    """
    pieces = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        formatter = _CONVERSIONS.get(spec)
        if formatter is None:
            pieces.append("%")
            continue
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(f"not enough arguments for %{spec}") from None
        pieces.append(formatter(value))
    return "".join(pieces)


def printf(template: str, *args: Any, out: Optional[TextIO] = None) -> int:
    """Write the expansion of ``template`` to ``out`` (standard output by
    default) and return the number of characters written."""
    text = sprintf(template, *args)
    write_str(text, out)
    return len(text)