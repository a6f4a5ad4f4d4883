"""NUL-terminated string routines.

A string here is a ``str`` or a bytes-like object. As with C strings, it
ends at its first NUL character, or at its end if it has none. Functions
that would return a pointer into the string return an index instead, or
``None`` where there is no match.
"""

from __future__ import annotations

import operator
import re
from itertools import islice, zip_longest
from typing import Iterator, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "atoi",
]

_ATOI_PATTERN = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")
_UINT_MOD = 2**32
_INT_MAX = 2**31 - 1


def _non_negative(n: int, what: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")
    return n


def _terminated(s: Text) -> Union[str, bytes]:
    """Return ``s`` cut at its first NUL, as ``str`` or ``bytes``."""
    if isinstance(s, str):
        end = s.find("\0")
        return s if end < 0 else s[:end]
    data = bytes(memoryview(s).cast("B"))
    end = data.find(0)
    return data if end < 0 else data[:end]


def _as_bytes(s: Text) -> bytes:
    """Return the bytes of ``s`` up to its first NUL; ``str`` is UTF-8 encoded."""
    text = _terminated(s)
    return text.encode("utf-8") if isinstance(text, str) else text


def _codes(s: Union[str, bytes]) -> Iterator[int]:
    return map(ord, s) if isinstance(s, str) else iter(s)


def _target(s: Union[str, bytes], c: Union[int, str]) -> Union[str, int]:
    """Return the element of ``s``'s kind that ``c`` stands for.

    An integer is truncated to a byte; a string must be one character.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if isinstance(s, str):
            return c
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in a byte")
        return code
    code = operator.index(c) & 0xFF
    return chr(code) if isinstance(s, str) else code


def _writable(dst) -> memoryview:
    view = memoryview(dst).cast("B")
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    return view


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strlcpy(dst, src: Text, size: int) -> int:
    """Copy ``src`` into the writable buffer ``dst``, NUL-terminating it.

    At most ``size - 1`` bytes are copied; nothing is written when ``size``
    is 0. ``size`` may not exceed the length of ``dst``. Returns the length
    of ``src`` in bytes, so a result ``>= size`` means it was truncated.
    """
    size = _non_negative(size, "size")
    view = _writable(dst)
    if size > len(view):
        raise ValueError(f"size {size} exceeds buffer of {len(view)} bytes")
    source = _as_bytes(src)
    if size:
        copied = source[: size - 1]
        view[: len(copied)] = copied
        view[len(copied)] = 0
    return len(source)


def strlcat(dst, src: Text, size: int) -> int:
    """Append ``src`` to the NUL-terminated string held in ``dst``.

    The result, terminator included, never takes more than ``size`` bytes.
    ``size`` may not exceed the length of ``dst``. Returns the length the
    full concatenation would have, or ``size`` plus the length of ``src``
    when ``size`` is no larger than the current string in ``dst``.
    """
    size = _non_negative(size, "size")
    view = _writable(dst)
    if size > len(view):
        raise ValueError(f"size {size} exceeds buffer of {len(view)} bytes")
    dstlen = strlen(view)
    source = _as_bytes(src)
    if size <= dstlen:
        return size + len(source)
    count = min(len(source), size - dstlen - 1)
    view[dstlen:dstlen + count] = source[:count]
    view[dstlen + count] = 0
    return dstlen + len(source)


def strchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    target = _target(text, c)
    if target in ("\0", 0):
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: Text, c: Union[int, str]) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    target = _target(text, c)
    if target in ("\0", 0):
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of unequal character codes,
    or 0 if the strings agree up to ``n`` characters or to their end.
    """
    n = _non_negative(n, "count")
    pairs = zip_longest(_codes(_terminated(s1)), _codes(_terminated(s2)), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Find ``needle`` wholly within the first ``length`` characters of
    ``haystack``. Returns its index, or ``None``.

    An empty needle is found at index 0.
    """
    length = _non_negative(length, "length")
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = _terminated(haystack)[:length].find(pattern)
    return None if index < 0 else index


def strdup(s: Text) -> Union[str, bytes]:
    """Return a copy of ``s`` up to its first NUL, as ``str`` or ``bytes``."""
    return _terminated(s)


def atoi(s: Text) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` commonly does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Values outside the 32-bit range
    wrap around modulo 2**32. Text without digits gives 0.
    """
    text = _terminated(s)
    if not isinstance(text, str):
        text = text.decode("latin-1")
    sign, digits = _ATOI_PATTERN.match(text).groups()
    # 10**32 is a multiple of 2**32, so earlier digits cannot change the result.
    value = int(digits[-32:]) if digits else 0
    if sign == "-":
        value = -value
    value %= _UINT_MOD
    return value - _UINT_MOD if value > _INT_MAX else value