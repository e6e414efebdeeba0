# libft

A small library of helpers for ASCII characters, byte buffers, C-style
strings, file-descriptor output and a singly linked list. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

ASCII classification and case mapping. Each function takes an `int` code or
a one-character `str`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (0..127), `is_print`
  (space through `~`) return `bool`.
- `to_upper` and `to_lower` change only ASCII letters. They return an `int`
  when given an `int` and a `str` when given a `str`.

A `bool`, or a value of any other type, raises `TypeError`. A string of length
other than one raises `ValueError`.

### `libft.memory`

Operations on `bytearray` and `bytes` buffers.

- `memset(buf, c, length)` fills the first `length` bytes with `c & 0xFF` and
  returns `buf`. `bzero(buf, length)` zeroes them.
- `memcpy(dst, src, length)` copies into the start of `dst` and returns `dst`.
  It returns `None` when both arguments are `None`.
- `memmove(buf, dst, src, length)` moves bytes between offsets of one buffer,
  and overlapping ranges are handled.
- `memchr(data, c, length)` returns the index of the first match, or `None`.
- `memcmp(a, b, length)` returns the difference of the first unequal bytes, or `0`.
- `calloc(count, size)` returns a zero-filled `bytearray`.

A negative length raises `ValueError`. A length past the end of a buffer
raises `IndexError`.

### `libft.strings`

String functions with C semantics: a `"\0"` ends the string. Searches return
an index, or `None` when there is no match.

- `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`.
- `strlcpy(src, size)` returns `(copied_text, len(src))`.
- `strlcat(dst, src, size)` returns `(result_text, would_be_length)`.
- `atoi(text)` skips whitespace, reads one optional sign and then digits. The
  result wraps as a signed 32-bit integer.

### `libft.transform`

Functions that build new strings.

- `substr`, `strjoin` and `strtrim`.
- `split(s, sep)` returns the non-empty pieces of `s`.
- `itoa(n)` accepts a signed 32-bit integer and raises `OverflowError` outside
  that range.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(chars, f)` edits a mutable sequence of characters in place.

### `libft.output`

Functions that write to a file descriptor with `os.write`:

- `put_char(c, fd)` writes one character.
- `put_str(s, fd)` writes a string. `None` writes nothing.
- `put_endl(s, fd)` writes a string and then a newline.
- `put_nbr(n, fd)` writes the decimal text of a signed 32-bit integer.

### `libft.linkedlist`

- `Node` is a dataclass with the fields `content` and `next`.
- `LinkedList(items=None)` provides `push_front`, `push_back`, `last`,
  `pop_front(delete=None)`, `clear(delete=None)`, `for_each(f)` and
  `map(f, delete=None)`. It also supports `len()` and iteration over contents.
- `clear` calls `delete` on each content, from last to first.
- `map` builds a new list. If `f` raises, `map` clears the partial result with
  `delete` and lets the error propagate.

## Examples

```python
from libft.strings import atoi, strchr
from libft.transform import split, strtrim, itoa
from libft.linkedlist import LinkedList

atoi("  -42abc")               # -42
strchr("hello", "l")           # 2
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
itoa(-2147483648)              # "-2147483648"

lst = LinkedList([1, 2, 3])
lst.push_front(0)
doubled = lst.map(lambda x: x * 2)
list(doubled)                  # [0, 2, 4, 6]
len(doubled)                   # 4
```

```python
import sys
from libft.output import put_nbr, put_endl

put_nbr(-1234, sys.stdout.fileno())
put_endl("", sys.stdout.fileno())
```

## What it does not do

This is a library only. It installs no command-line program. It does no
memory management of its own: buffers are ordinary Python `bytearray` objects.