"""Write characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import operator
import os
from typing import Union

from libft.cstring import strdup

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: Union[str, bytes, bytearray, memoryview]) -> bytes:
    text = strdup(s)
    return text.encode("utf-8") if isinstance(text, str) else text


def put_char(c: Union[str, int], fd: int) -> None:
    """Write one character to ``fd``.

    A string must be a single character and is written as UTF-8; an integer
    is truncated to one byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([operator.index(c) & 0xFF])
    _write_all(fd, data)


def put_str(s: Union[str, bytes, bytearray, memoryview], fd: int) -> None:
    """Write ``s``, up to its first NUL, to ``fd``."""
    _write_all(fd, _encode(s))


def put_endl(s: Union[str, bytes, bytearray, memoryview], fd: int) -> None:
    """Write ``s``, up to its first NUL, followed by a newline to ``fd``."""
    _write_all(fd, _encode(s) + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(operator.index(n)).encode("ascii"))