# libft

Helpers that follow the behaviour of the classic C library routines:
ASCII character classification, byte-buffer manipulation, NUL-terminated
string routines, string building, writing to file descriptors, and a
singly linked list.

Strings may be `str` or bytes-like objects. As with C strings, a string
ends at its first NUL character. Where a C routine would return a pointer
into a string or buffer, these functions return an index, or `None` when
there is no match. Invalid arguments, such as negative counts or spans
that run past the end of a buffer, raise `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.ctype`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and
`tolower` accept an integer character code or a one-character string and
use plain ASCII ranges. The `is*` functions return `bool`. `toupper` and
`tolower` return the same kind they were given: an `int` for an `int`, a
`str` for a `str`.

```python
from libft.ctype import isalpha, toupper

isalpha("A")         # True
isalpha(ord("1"))    # False
toupper("a")         # "A"
toupper(ord("a"))    # 65
```

### `libft.memory`

Operations on `bytearray` and other bytes-like buffers:

- `memset(buf, c, length)` fills the first `length` bytes with `c` and returns `buf`.
- `bzero(buf, length)` zeroes the first `length` bytes.
- `memcpy(dst, src, n)` copies `n` bytes from `src` to the start of `dst`.
- `memmove(buf, dest, src, n)` moves `n` bytes inside one buffer between
  the offsets `src` and `dest`; overlapping regions are handled.
- `memchr(buf, c, n)` returns the index of the first byte equal to `c`, or `None`.
- `memcmp(s1, s2, n)` returns the difference of the first unequal bytes, or 0.
- `calloc(nmemb, size)` returns a zeroed `bytearray`, raising
  `OverflowError` when the total exceeds `SIZE_MAX` (2**64 - 1).

```python
from libft.memory import calloc, memset, memmove

buf = calloc(2, 4)          # bytearray(8)
memset(buf, ord("X"), 3)    # bytearray(b"XXX\x00\x00\x00\x00\x00")

text = bytearray(b"Hello, world!")
memmove(text, 6, 0, 5)      # bytearray(b"Hello,Hellod!")
```

### `libft.cstring`

`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
`strdup` and `atoi`.

- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` write into a
  writable buffer and return the length they tried to create, so a result
  of `size` or more means the copy was truncated.
- `strchr` and `strrchr` return an index; searching for NUL finds the
  terminator at `strlen(s)`.
- `strnstr(haystack, needle, length)` finds `needle` wholly within the
  first `length` characters; an empty needle is found at 0.
- `atoi` skips leading whitespace, accepts one sign and reads digits until
  the first non-digit. Results wrap around to the signed 32-bit range;
  text without digits gives 0.

```python
from libft.cstring import atoi, strlcpy, strncmp

atoi("   -42abc")                  # -42
atoi("2147483648")                 # -2147483648
strncmp("hello", "helloworld", 5)  # 0

dest = bytearray(50)
strlcpy(dest, "Hello, World!", 10) # 13; dest starts with b"Hello, Wo\x00"
```

### `libft.output`

`put_char(c, fd)`, `put_str(s, fd)`, `put_endl(s, fd)` and `put_nbr(n, fd)`
write to a file descriptor. Text is written as UTF-8; an integer passed to
`put_char` is truncated to one byte.

```python
from libft.output import put_endl, put_nbr

put_nbr(-12345, 1)
put_endl("", 1)
```

### `libft.text`

- `substr(s, start, length)` returns at most `length` characters from `start`.
- `strjoin(s1, s2)` concatenates two strings of the same kind.
- `strtrim(s, charset)` strips characters of `charset` from both ends.
- `split(s, sep)` splits on a single separator and drops empty words.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(chars, f)` replaces each element of a mutable sequence, up to
  its first NUL, with `f(index, element)` in place.
- `itoa(n)` returns the decimal form of `n`.

```python
from libft.text import itoa, split, strtrim

split("been living here since 2005!", " ")
# ["been", "living", "here", "since", "2005!"]
strtrim("   hello world    ", " ")   # "hello world"
itoa(-12345)                         # "-12345"
```

### `libft.linkedlist`

`LinkedList` is a singly linked list of `Node` objects, each holding a
`content` and a `next` node. It can be built from an iterable;
`push_front` and `push_back` add an item and return its node, `last()`
returns the final node or `None`, and `len()` and iteration give the
number of items and their contents, front to back.

```python
from libft.linkedlist import LinkedList

items = LinkedList()
items.push_back("World")
items.push_front("Hello")
len(items)            # 2
items.last().content  # "World"
list(items)           # ["Hello", "World"]
```

## What it does not do

This is a library only: it installs no command-line program. Memory is
managed by Python, so there are no allocation or free routines beyond
`calloc` returning a fresh `bytearray`.