"""Formatted output to a file descriptor or a text stream.

Every writer accepts either an integer file descriptor, which receives
UTF-8 encoded bytes, or an object with a ``write(str)`` method.
"""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, TextIO, Union

Output = Union[int, TextIO]

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _emit(out: Output, text: str) -> int:
    if not text:
        return 0
    if isinstance(out, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(out, data)
            data = data[written:]
    else:
        out.write(text)
    return len(text)


def _digits(n: int, base: str) -> str:
    if len(base) < 2:
        raise ValueError(f"base must hold at least two symbols, got {base!r}")
    radix = len(base)
    if n == 0:
        return base[0]
    symbols = []
    while n:
        n, digit = divmod(n, radix)
        symbols.append(base[digit])
    return "".join(reversed(symbols))


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= (1 << 31) else value


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%c expects a character or an int, got {type(value).__name__}")
    return chr(value & 0xFF)


def put_nbr_base(out: Output, n: int, base: str) -> int:
    """Write *n* using the symbols of *base*, with a leading '-' when negative.

    Returns the number of characters written.
    """
    text = ("-" if n < 0 else "") + _digits(abs(n), base)
    return _emit(out, text)


def put_ptr(out: Output, ptr: Optional[int]) -> int:
    """Write an address as lowercase hexadecimal prefixed by '0x'.

    A null address (None or 0) is written as '(nil)'. Returns the number
    of characters written.
    """
    if not ptr:
        return _emit(out, "(nil)")
    return _emit(out, "0x" + _digits(ptr & _UINT64, _HEX_LOWER))


def printfd(out: Output, fmt: str, *args: Any) -> int:
    """Write *fmt* to *out*, expanding conversion specifiers from *args*.

    Supported specifiers are %c, %s, %p, %d, %i, %u, %x, %X and %%.
    %d and %i take the value as a signed 32-bit integer; %u, %x and %X as
    an unsigned 32-bit one. A None string prints as '(null)'. An unknown
    specifier prints nothing. Returns the number of characters written.
    """
    remaining = iter(args)
    length = 0
    pending = []

    def flush() -> int:
        text = "".join(pending)
        pending.clear()
        return _emit(out, text)

    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pending.append(ch)
            continue
        spec = next(chars, "")
        length += flush()
        if spec == "c":
            length += _emit(out, _char(_next_arg(remaining, spec)))
        elif spec == "s":
            value = _next_arg(remaining, spec)
            length += _emit(out, "(null)" if value is None else str(value))
        elif spec == "p":
            length += put_ptr(out, _next_arg(remaining, spec))
        elif spec in ("d", "i"):
            length += put_nbr_base(out, _int32(_next_arg(remaining, spec)), _DECIMAL)
        elif spec == "u":
            length += put_nbr_base(out, _next_arg(remaining, spec) & _UINT32, _DECIMAL)
        elif spec == "x":
            length += put_nbr_base(out, _next_arg(remaining, spec) & _UINT32, _HEX_LOWER)
        elif spec == "X":
            length += put_nbr_base(out, _next_arg(remaining, spec) & _UINT32, _HEX_UPPER)
        elif spec == "%":
            length += _emit(out, "%")
    length += flush()
    return length


def put_char(c: Union[str, int], out: Output) -> None:
    """Write a single character."""
    _emit(out, _char(c))


def put_str(s: Optional[str], out: Output) -> None:
    """Write *s*; None writes nothing."""
    if s is None:
        return
    _emit(out, s)


def put_endl(s: Optional[str], out: Output) -> None:
    """Write *s* followed by a newline; None writes nothing."""
    if s is None:
        return
    _emit(out, s + "\n")


def put_nbr(n: int, out: Output) -> None:
    """Write *n* in decimal."""
    put_nbr_base(out, n, _DECIMAL)