"""String and byte-buffer helpers: splitting, trimming, searching and comparing.

Strings are treated the way a NUL-terminated buffer would be: searching for
the NUL character finds the end of the string, and comparisons treat the end
of the shorter string as a NUL character.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        if c < 0:
            raise ValueError(f"character code must be non-negative, got {c}")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(
        f"expected a character code or a one-character string, not {type(c).__name__}"
    )


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(_char(sep)) if piece]


def trim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    if not isinstance(chars, str):
        raise TypeError("chars must be a string")
    return s.strip(chars)


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def iter_indexed(s: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for each character of ``s``."""
    for index, char in enumerate(s):
        func(index, char)


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the NUL character finds ``len(s)``."""
    char = _char(c)
    if char == _NUL:
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the NUL character finds ``len(s)``."""
    char = _char(c)
    if char == _NUL:
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if limit < 0:
        raise ValueError("limit must be non-negative")
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def compare(s1: Optional[str], s2: str) -> int:
    """Difference of the first differing character codes, or 0 if equal.

    A missing first string compares as 1.
    """
    if s1 is None:
        return 1
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return compare(s1[:n], s2[:n])


def find_byte(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` within ``data[:n]``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def compare_bytes(b1: bytes, b2: bytes, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, or 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n > len(b1) or n > len(b2):
        raise ValueError("n exceeds the length of a buffer")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0