"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buf in buffers:
        if count > len(buf):
            raise ValueError(f"count {count} exceeds buffer length {len(buf)}")


def zero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero in place."""
    _check_count(count, buffer)
    buffer[:count] = bytes(count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_chr(buffer: bytes, value: int, count: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` within the
    first ``count`` bytes, or None if absent."""
    _check_count(count, buffer)
    index = bytes(buffer[:count]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(first: bytes, second: bytes, count: int) -> int:
    """Compare the first ``count`` bytes; return the difference of the
    first unequal pair, or 0 if they match."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def mem_copy(dest: Optional[bytearray], src: Optional[bytes], count: int) -> Optional[bytearray]:
    """Copy ``count`` bytes from ``src`` into the start of ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("dest and src must both be given")
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def mem_move(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Move ``count`` bytes inside ``buffer`` from offset ``src`` to offset
    ``dest``; overlapping regions are handled correctly."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError("count must not be negative")
    if max(dest, src) + count > len(buffer):
        raise ValueError("move extends past end of buffer")
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def mem_set(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value``."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer