"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. Classification follows the plain ASCII ranges and ignores locale.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[int, str]

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def isalpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: CharLike) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return _is_digit(_code(c))


def isalnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    code = _code(c)
    return _is_digit(code) or _is_upper(code) or _is_lower(code)


def isascii(c: CharLike) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True if ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone.

    The result has the same kind as the argument: ``int`` in, ``int`` out;
    ``str`` in, ``str`` out.
    """
    code = _code(c)
    if _is_lower(code):
        code -= ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone.

    The result has the same kind as the argument: ``int`` in, ``int`` out;
    ``str`` in, ``str`` out.
    """
    code = _code(c)
    if _is_upper(code):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code