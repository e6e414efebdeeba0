"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import overload

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True if c is an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: int | str) -> bool:
    """True if c is an ASCII decimal digit."""
    return _code(c) in _DIGIT


def is_alnum(c: int | str) -> bool:
    """True if c is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True if c lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True if c is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


@overload
def to_upper(c: int) -> int: ...
@overload
def to_upper(c: str) -> str: ...


def to_upper(c):
    """Convert an ASCII lowercase letter to uppercase; anything else is returned unchanged."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: int) -> int: ...
@overload
def to_lower(c: str) -> str: ...


def to_lower(c):
    """Convert an ASCII uppercase letter to lowercase; anything else is returned unchanged."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code