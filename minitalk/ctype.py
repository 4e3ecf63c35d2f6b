"""Character classification and case mapping on character codes.

Every function takes either an integer character code or a one-character
string. Predicates return ``bool``; mapping functions return an ``int`` code.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_XDIGIT_LETTERS = frozenset(b"abcdeABCDE")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(
        f"expected a character code or a one-character string, not {type(c).__name__}"
    )


def is_upper(c: CharLike) -> bool:
    """True for ``A``-``Z``."""
    code = _code(c)
    return ord("A") <= code <= ord("Z")


def is_lower(c: CharLike) -> bool:
    """True for ``a``-``z``."""
    code = _code(c)
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    return is_upper(c) or is_lower(c)


def is_digit(c: CharLike) -> bool:
    """True for ``0``-``9``."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_blank(c: CharLike) -> bool:
    """True for space and horizontal tab."""
    return _code(c) in (32, 9)


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def is_graph(c: CharLike) -> bool:
    """True for printable ASCII other than space."""
    return 33 <= _code(c) <= 126


def is_cntrl(c: CharLike) -> bool:
    """True for ASCII codes that are not printable."""
    return is_ascii(c) and not is_print(c)


def is_punct(c: CharLike) -> bool:
    """True for printable ASCII that is neither alphanumeric nor space."""
    code = _code(c)
    return is_print(code) and not is_alnum(code) and code != 32


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def is_xdigit(c: CharLike) -> bool:
    """True for digits and the letters ``a``-``e`` and ``A``-``E``.

    The letter search works on the low byte of the code, so the NUL code
    (which matches the end of the letter table) is also accepted.
    """
    code = _code(c)
    if is_digit(code):
        return True
    low = code & 0xFF
    return low == 0 or low in _XDIGIT_LETTERS


def to_ascii(c: CharLike) -> int:
    """Keep only the low seven bits of the code."""
    return _code(c) & 0x7F


def to_lower(c: CharLike) -> int:
    """Map ``A``-``Z`` to lower case; other codes are returned unchanged."""
    code = _code(c)
    return code + 32 if is_upper(code) else code


def to_upper(c: CharLike) -> int:
    """Map ``a``-``z`` to upper case; other codes are returned unchanged."""
    code = _code(c)
    return code - 32 if is_lower(code) else code