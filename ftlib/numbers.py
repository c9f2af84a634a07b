"""Integer parsing and formatting, and angle conversion."""

from __future__ import annotations

import math
import struct

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _parse_decimal(text: str) -> int:
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < len(text) and text[i] in _DIGITS:
        result = result * 10 + _DIGITS.index(text[i])
        i += 1
    return result * sign


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are accepted; parsing stops
    at the first non-digit. Text with no digits yields 0.
    """
    return _parse_decimal(text)


def atol(text: str) -> int:
    """Parse a leading decimal integer, as :func:`atoi` does."""
    return _parse_decimal(text)


def is_valid_base(base: str) -> bool:
    """Check that *base* has at least two distinct printable, sign-free symbols."""
    if len(base) < 2 or len(set(base)) != len(base):
        return False
    return all(33 <= ord(ch) <= 126 and ch not in "+-" for ch in base)


def base_index(c: str, base: str) -> int:
    """Position of *c* in *base*, or -1 when it is not a digit of the base."""
    return base.find(c)


def atoi_base(text: str, base: str) -> int:
    """Convert *text* written in the digits of *base* to an integer.

    Leading whitespace and any number of signs are accepted; each '-'
    flips the sign. Everything after the signs must be digits of *base*.

    Raises ValueError for an invalid base or a character outside it.
    """
    if not is_valid_base(base):
        raise ValueError(f"invalid base {base!r}")
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    while i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -sign
        i += 1
    radix = len(base)
    number = 0
    for ch in text[i:]:
        digit = base_index(ch, base)
        if digit < 0:
            raise ValueError(f"character {ch!r} is not in base {base!r}")
        number = number * radix + digit
    return number * sign


def itoa(n: int) -> str:
    """Decimal representation of *n*, with a leading '-' when negative."""
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits


def _f32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


_PI_F32 = _f32(math.pi)


def degtorad(deg: float) -> float:
    """Degrees to radians, computed in single precision."""
    return _f32(_f32(deg) * _f32(_PI_F32 / 180.0))


def radtodeg(rad: float) -> float:
    """Radians to degrees, computed in single precision."""
    return _f32(_f32(rad) * _f32(180.0 / _PI_F32))