"""Writing characters, strings and integers to file descriptors."""

from __future__ import annotations

import os

from .strings import _as_char, _cstr
from .transform import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _write(fd: int, data: bytes) -> None:
    """Write all of data to fd, retrying after short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: int | str, fd: int) -> None:
    """Write one character to fd; an int is written as its low byte."""
    if isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        data = _as_char(c).encode("utf-8")
    _write(fd, data)


def put_str(s: str | None, fd: int) -> None:
    """Write s, up to its first NUL, to fd. None writes nothing."""
    if s is None:
        return
    _write(fd, _cstr(s).encode("utf-8"))


def put_endl(s: str | None, fd: int) -> None:
    """Write s followed by a newline to fd."""
    put_str(s, fd)
    put_char("\n", fd)


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of a signed 32-bit integer to fd."""
    put_str(itoa(n), fd)