"""String searching, comparison, slicing and building helpers.

Searches return an index into the string instead of a pointer, or None
when nothing is found. The end of a string acts as a terminating code 0
for comparisons and searches.
"""

from __future__ import annotations

import os
import string
from typing import Callable, List, MutableSequence, Optional, Tuple, TypeVar, Union

CharLike = Union[str, int]
T = TypeVar("T")

_UPPER = string.ascii_uppercase


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c & 0xFF


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings.

    Returns the difference of the first differing character codes, where
    the end of a string counts as code 0; 0 when the strings are equal.
    """
    for i in range(max(len(s1), len(s2))):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b:
            return a - b
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first *n* characters of two strings, as :func:`strcmp`."""
    if n < 0:
        raise ValueError("n must not be negative")
    return strcmp(s1[:n], s2[:n])


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for code 0 finds the end of the string, ``len(s)``.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for code 0 finds the end of the string, ``len(s)``.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *length* characters of *haystack*.

    An empty needle is found at index 0. Returns None when absent.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* beginning at *start*.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings into a new one."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Split *s* on the single character *sep*, dropping empty words."""
    separator = chr(_char_code(sep)) if isinstance(sep, int) else sep
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(separator) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of *s*."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` for each item of *s*, in place.

    When *f* returns something other than None, it replaces the item.
    """
    for i, item in enumerate(s):
        replacement = f(i, item)
        if replacement is not None:
            s[i] = replacement


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* slots, one kept for the terminator.

    Returns the copied text (at most ``size - 1`` characters; empty when
    *size* is 0) and the length of *src*, the length that was attempted.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* in a buffer of *size* slots.

    Returns the resulting text and the length that was attempted. When
    *size* cannot even hold *dst*, *dst* is returned unchanged together
    with ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = len(dst)
    if size < dst_len + 1:
        return dst, len(src) + size
    result = dst
    if size > dst_len + 1:
        result = dst + src[:size - 1 - dst_len]
    return result, dst_len + len(src)


def rand_str(length: int) -> str:
    """Random string of *length* uppercase letters A-Z."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(_UPPER[byte % 26] for byte in os.urandom(length))