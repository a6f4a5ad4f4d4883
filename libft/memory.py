"""Byte-buffer operations: fill, copy, move, search and compare."""

from __future__ import annotations

import operator
from typing import Optional

__all__ = [
    "SIZE_MAX",
    "memset",
    "bzero",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "calloc",
]

SIZE_MAX = 2**64 - 1


def _view(buf) -> memoryview:
    return memoryview(buf).cast("B")


def _check_count(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    return n


def _check_span(view: memoryview, offset: int, n: int, what: str) -> None:
    if offset < 0:
        raise ValueError(f"{what} offset must not be negative, got {offset}")
    if offset + n > len(view):
        raise ValueError(
            f"{what} span {offset}..{offset + n} exceeds buffer of {len(view)} bytes"
        )


def memset(buf, c: int, length: int):
    """Set the first ``length`` bytes of ``buf`` to ``c`` (truncated to a byte).

    Returns ``buf``.
    """
    length = _check_count(length)
    view = _view(buf)
    _check_span(view, 0, length, "destination")
    view[:length] = bytes([operator.index(c) & 0xFF]) * length
    return buf


def bzero(buf, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def memcpy(dst, src, n: int):
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``.

    Returns ``dst``.
    """
    n = _check_count(n)
    dview = _view(dst)
    sview = _view(src)
    _check_span(dview, 0, n, "destination")
    _check_span(sview, 0, n, "source")
    dview[:n] = bytes(sview[:n])
    return dst


def memmove(buf, dest: int, src: int, n: int):
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    n = _check_count(n)
    dest = operator.index(dest)
    src = operator.index(src)
    view = _view(buf)
    _check_span(view, dest, n, "destination")
    _check_span(view, src, n, "source")
    view[dest:dest + n] = bytes(view[src:src + n])
    return buf


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within the first
    ``n`` bytes of ``buf``, or ``None`` if there is none."""
    n = _check_count(n)
    view = _view(buf)
    _check_span(view, 0, n, "search")
    index = bytes(view[:n]).find(operator.index(c) & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    n = _check_count(n)
    v1 = _view(s1)
    v2 = _view(s2)
    _check_span(v1, 0, n, "first")
    _check_span(v2, 0, n, "second")
    for a, b in zip(v1[:n], v2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises ``OverflowError`` when the total size does not fit in a 64-bit
    size.
    """
    nmemb = _check_count(nmemb)
    size = _check_count(size)
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the maximum size")
    return bytearray(nmemb * size)