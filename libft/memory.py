"""Byte-buffer operations: fill, copy, move, search, compare, allocate."""

from __future__ import annotations

from collections.abc import Sequence


def _check_length(length: int, *buffers: Sequence[int]) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise IndexError(
                f"length {length} exceeds buffer of size {len(buffer)}"
            )


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` truncated to a byte."""
    _check_length(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def memcpy(
    dst: bytearray | None, src: bytes | bytearray | None, length: int
) -> bytearray | None:
    """Copy ``length`` bytes from ``src`` into the start of ``dst``.

    Returns ``dst``, or ``None`` when both buffers are ``None``.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``buf`` from offset ``src`` to ``dst``.

    Overlapping regions are handled correctly.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    end = max(dst, src) + length
    if end > len(buf):
        raise IndexError(f"move of {length} bytes exceeds buffer of size {len(buf)}")
    if dst != src:
        buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(data: bytes | bytearray, c: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``length`` bytes."""
    _check_length(length, data)
    index = bytes(data[:length]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, length: int) -> int:
    """Compare the first ``length`` bytes; return the first difference or 0."""
    _check_length(length, a, b)
    return next(
        (x - y for x, y in zip(a[:length], b[:length]) if x != y),
        0,
    )


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)