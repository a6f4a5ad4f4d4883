"""String building: substrings, joining, trimming, splitting and mapping.

Strings are ``str`` or bytes-like objects and, as elsewhere in the
package, end at their first NUL character.
"""

from __future__ import annotations

import operator
from typing import Callable, List, MutableSequence, Union

from libft.cstring import strdup

Text = Union[str, bytes, bytearray, memoryview]
Sep = Union[str, bytes, int]

__all__ = ["substr", "strjoin", "strtrim", "split", "strmapi", "striteri", "itoa"]


def _non_negative(n: int, what: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")
    return n


def _separator(text: Union[str, bytes], sep: Sep) -> Union[str, bytes]:
    """Return ``sep`` as a one-element value of the same kind as ``text``."""
    if isinstance(sep, (bytes, bytearray)):
        if len(sep) != 1:
            raise ValueError(f"expected a single byte, got {sep!r}")
        code = sep[0]
    elif isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        if isinstance(text, str):
            return sep
        code = ord(sep)
        if code > 0xFF:
            raise ValueError(f"character {sep!r} does not fit in a byte")
    else:
        code = operator.index(sep) & 0xFF
    return chr(code) if isinstance(text, str) else bytes([code])


def substr(s: Text, start: int, length: int) -> Union[str, bytes]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of the string gives an empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    text = strdup(s)
    return text[start:start + length]


def strjoin(s1: Text, s2: Text) -> Union[str, bytes]:
    """Return ``s1`` followed by ``s2``; both must be text or both bytes."""
    first = strdup(s1)
    second = strdup(s2)
    if type(first) is not type(second):
        raise TypeError("cannot join text with bytes")
    return first + second


def strtrim(s: Text, charset: Text) -> Union[str, bytes]:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    text = strdup(s)
    chars = strdup(charset)
    if type(text) is not type(chars):
        raise TypeError("string and character set must both be text or both bytes")
    return text.strip(chars)


def split(s: Text, sep: Sep) -> List[Union[str, bytes]]:
    """Split ``s`` on ``sep``, dropping the empty words between repeated separators."""
    text = strdup(s)
    delimiter = _separator(text, sep)
    return [word for word in text.split(delimiter) if word]


def strmapi(s: Text, f: Callable) -> Union[str, bytes]:
    """Build a new string from ``f(index, char)`` for each character of ``s``.

    For text ``f`` must return a single character; for bytes, an integer
    byte value. A NUL produced by ``f`` ends the result.
    """
    text = strdup(s)
    if isinstance(text, bytes):
        return strdup(bytes(f(i, code) for i, code in enumerate(text)))
    mapped = []
    for i, ch in enumerate(text):
        result = f(i, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must return a single character, got {result!r}")
        mapped.append(result)
    return strdup("".join(mapped))


def striteri(chars: MutableSequence, f: Callable) -> None:
    """Replace each element of ``chars`` before its first NUL with ``f(index, element)``.

    ``chars`` is a mutable sequence such as a list of characters or a
    ``bytearray``; it is changed in place.
    """
    end = next(
        (i for i, ch in enumerate(chars) if ch in ("\0", 0) and not isinstance(ch, bool)),
        len(chars),
    )
    for i, ch in enumerate(chars[:end]):
        chars[i] = f(i, ch)


def itoa(n: int) -> str:
    """Return the decimal form of ``n``."""
    return str(operator.index(n))