"""String builders: substring, join, trim, split, integer formatting and per-character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from .strings import _as_char, _check_size, _cstr

__all__ = [
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "itoa",
    "strmapi",
    "striteri",
]

_NUL = "\0"
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s starting at index start.

    A start at or past the end of the string gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of s1 and s2."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    return _cstr(s).strip(_cstr(charset))


def split(s: str, sep: int | str) -> list[str]:
    """The non-empty pieces of s between occurrences of the separator character."""
    text = _cstr(s)
    separator = _as_char(sep)
    return [piece for piece in text.split(separator) if piece]


def itoa(n: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], int | str]) -> str:
    """A new string built from f(index, char) for every character of s.

    f may return a one-character string or a character code. A NUL result
    ends the string there.
    """
    text = _cstr(s)
    mapped = "".join(_as_char(f(index, ch)) for index, ch in enumerate(text))
    return _cstr(mapped)


def striteri(
    chars: MutableSequence[str],
    f: Callable[[int, str], int | str | None],
) -> None:
    """Call f(index, char) on each character of chars, in place, up to the first NUL.

    When f returns a character (or a character code) it replaces the one at
    that index; when it returns None the character is left as it is.
    """
    for index, ch in enumerate(chars):
        if ch == _NUL:
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = _as_char(replacement)