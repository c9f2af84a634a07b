"""Byte-buffer operations: filling, copying, searching and comparing.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Every length is checked against the buffers involved,
and a ValueError is raised when it does not fit.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int byte value, got {type(c).__name__}")
    return c & 0xFF


def _check_length(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"n={n} exceeds buffer length {len(buf)}")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Set the first *n* bytes of *buf* to ``c & 0xFF`` and return *buf*."""
    _check_length(n, buf)
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def memcpy(dst: Buffer, src: Readable, n: int) -> Buffer:
    """Copy the first *n* bytes of *src* into the start of *dst* and return *dst*."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Move *n* bytes inside *buf* from offset *src* to offset *dest*.

    The regions may overlap; the result is as if the source bytes were
    copied out first. Returns *buf*.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("n must not be negative")
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    if dest == src or n == 0:
        return buf
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: Readable, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` in the first *n* bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first differing byte values, or 0 when
    the regions are equal.
    """
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0