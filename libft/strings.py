"""C-style string queries: length, search, comparison, bounded copy and integer parsing.

Strings follow C semantics: a NUL character ends the string, and anything after
it is ignored. Searches return an index into the string, or ``None`` where C
would return a null pointer.
"""

from __future__ import annotations

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strdup",
    "atoi",
]

_NUL = "\0"
_ATOI_SPACE = frozenset(" \t\n\v\f\r")
_ASCII_DIGITS = frozenset("0123456789")
_INT_BITS = 32


def _cstr(s: str) -> str:
    """Return s up to, but not including, its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    head, _, _ = s.partition(_NUL)
    return head


def _as_char(c: int | str) -> str:
    """Return c as a single character; an int keeps only its low byte, as a C char would."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal pair, else 0."""
    _check_size("n", n)
    a = _cstr(s1)[:n]
    b = _cstr(s2)[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    # The shorter string ends with its terminator, which compares as 0.
    return ord(a[len(b)]) if len(a) > len(b) else -ord(b[len(a)])


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first needle in haystack lying wholly within its first length characters.

    An empty needle matches at index 0.
    """
    _check_size("length", length)
    hay = _cstr(haystack)
    pattern = _cstr(needle)
    if not pattern:
        return 0
    if not hay or length < len(pattern):
        return None
    last_start = min(length - len(pattern) + 1, len(hay))
    return next(
        (pos for pos in range(last_start) if hay.startswith(pattern, pos)),
        None,
    )


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text, truncated to ``size - 1`` characters, and the full
    length of src. With size 0 nothing is copied.
    """
    _check_size("size", size)
    text = _cstr(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst in a buffer of size characters, terminator included.

    Returns the resulting text and the length the full concatenation would
    have had. If size does not exceed the length of dst, dst is left as it is
    and ``size + strlen(src)`` is returned.
    """
    _check_size("size", size)
    head = _cstr(dst)
    tail = _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    return head + tail[: size - len(head) - 1], len(head) + len(tail)


def strdup(s: str) -> str:
    """A copy of s up to its terminator."""
    return _cstr(s)


def _wrap_int(value: int) -> int:
    """Reduce value to a signed 32-bit integer with two's-complement wraparound."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(text: str) -> int:
    """Parse a decimal integer the way C atoi does.

    Leading whitespace is skipped, one optional sign is read, then ASCII digits
    up to the first non-digit. No digits gives 0. The result wraps as a signed
    32-bit int.
    """
    s = _cstr(text)
    pos = 0
    while pos < len(s) and s[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(s) and s[end] in _ASCII_DIGITS:
        end += 1
    digits = s[pos:end]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)