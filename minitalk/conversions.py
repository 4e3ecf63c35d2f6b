"""Conversions between text and fixed-width integers.

The integer types behave like their fixed-width machine counterparts.
``int`` is 32 bits, ``short`` is 16 bits and ``long`` is 64 bits, with
unsigned variants of each. Values passed in are wrapped to the width of the
type, and parsed results wrap on overflow.

The digit count behind every ``*toa`` function is taken on a 32-bit signed
integer. Wider values whose low 32 bits have fewer digits than the full
value are therefore rendered as their trailing digits only.
"""

from __future__ import annotations

from minitalk.ctype import is_digit, is_space

DECIMAL = "0123456789"
OCTAL = "01234567"
HEX = "0123456789abcdef"

_INT_BITS = 32
_SHORT_BITS = 16
_LONG_BITS = 64

_INT_MIN_TEXT = "-2147483648"
_LONG_MIN_TEXT = "-9223372036854775808"
_SHORT_MIN_TEXT = "-32767"


def _wrap(value: int, bits: int, signed: bool = True) -> int:
    """Reduce ``value`` to a ``bits``-wide two's-complement integer."""
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _check_base(base: str) -> None:
    if not isinstance(base, str):
        raise TypeError("base must be a string of digit characters")
    if len(base) < 2:
        raise ValueError("base must hold at least two digit characters")


def count_digits(n: int, base_len: int) -> int:
    """Number of digits of ``n`` in a base of ``base_len`` digits.

    ``n`` is first wrapped to a 32-bit signed integer; zero has one digit and
    the sign is not counted.
    """
    if base_len < 2:
        raise ValueError("base_len must be at least 2")
    n = abs(_wrap(n, _INT_BITS))
    if n == 0:
        return 1
    digits = 0
    while n:
        n //= base_len
        digits += 1
    return digits


def _render(n: int, base: str, digits: int) -> str:
    """The ``digits`` least significant digits of non-negative ``n``."""
    radix = len(base)
    chars = []
    for _ in range(digits):
        n, remainder = divmod(n, radix)
        chars.append(base[remainder])
    return "".join(reversed(chars))


def _signed_to_text(n: int, base: str, bits: int, minimum_text: str) -> str:
    _check_base(base)
    n = _wrap(n, bits)
    if n == 0:
        return "0"
    if n == -(1 << (bits - 1)):
        return minimum_text
    negative = n < 0
    n = abs(n)
    digits = count_digits(n, len(base)) + (1 if negative else 0)
    text = _render(n, base, digits)
    return "-" + text[1:] if negative else text


def _unsigned_to_text(n: int, base: str, bits: int) -> str:
    _check_base(base)
    n = _wrap(n, bits, signed=False)
    return _render(n, base, count_digits(n, len(base)))


def _parse(text: str) -> int:
    """Parse optional leading whitespace, one sign and decimal digits."""
    chars = iter(text)
    current = next(chars, None)
    while current is not None and is_space(current):
        current = next(chars, None)
    sign = 1
    if current in ("-", "+"):
        if current == "-":
            sign = -1
        current = next(chars, None)
    result = 0
    while current is not None and is_digit(current):
        result = result * 10 + (ord(current) - ord("0"))
        current = next(chars, None)
    return _wrap(result * sign, _LONG_BITS)


def atoi(text: str) -> int:
    """Parse ``text`` as a 32-bit signed integer, wrapping on overflow."""
    return _wrap(_parse(text), _INT_BITS)


def atol(text: str) -> int:
    """Parse ``text`` as a 64-bit signed integer, wrapping on overflow."""
    return _parse(text)


def atos(text: str) -> int:
    """Parse ``text`` as a 16-bit signed integer, wrapping on overflow."""
    return _wrap(_parse(text), _SHORT_BITS)


def itoa_base(n: int, base: str) -> str:
    """Render a 32-bit signed integer using the digit characters of ``base``."""
    return _signed_to_text(n, base, _INT_BITS, _INT_MIN_TEXT)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    return itoa_base(n, DECIMAL)


def itoa_o(n: int) -> str:
    """Render a 32-bit signed integer in octal."""
    return itoa_base(n, OCTAL)


def itoa_x(n: int) -> str:
    """Render a 32-bit signed integer in lower-case hexadecimal."""
    return itoa_base(n, HEX)


def ltoa_base(n: int, base: str) -> str:
    """Render a 64-bit signed integer using the digit characters of ``base``."""
    return _signed_to_text(n, base, _LONG_BITS, _LONG_MIN_TEXT)


def ltoa(n: int) -> str:
    """Render a 64-bit signed integer in decimal."""
    return ltoa_base(n, DECIMAL)


def ltoa_o(n: int) -> str:
    """Render a 64-bit signed integer in octal."""
    return ltoa_base(n, OCTAL)


def ltoa_x(n: int) -> str:
    """Render a 64-bit signed integer in lower-case hexadecimal."""
    return ltoa_base(n, HEX)


def stoa_base(n: int, base: str) -> str:
    """Render a 16-bit signed integer using the digit characters of ``base``.

    The most negative value is rendered as ``-32767``.
    """
    return _signed_to_text(n, base, _SHORT_BITS, _SHORT_MIN_TEXT)


def stoa(n: int) -> str:
    """Render a 16-bit signed integer in decimal."""
    return stoa_base(n, DECIMAL)


def stoa_o(n: int) -> str:
    """Render a 16-bit signed integer in octal."""
    return stoa_base(n, OCTAL)


def stoa_x(n: int) -> str:
    """Render a 16-bit signed integer in lower-case hexadecimal."""
    return stoa_base(n, HEX)


def uitoa_base(n: int, base: str) -> str:
    """Render a 32-bit unsigned integer using the digit characters of ``base``."""
    return _unsigned_to_text(n, base, _INT_BITS)


def uitoa(n: int) -> str:
    """Render a 32-bit unsigned integer in decimal."""
    return uitoa_base(n, DECIMAL)


def uitoa_o(n: int) -> str:
    """Render a 32-bit unsigned integer in octal."""
    return uitoa_base(n, OCTAL)


def uitoa_x(n: int) -> str:
    """Render a 32-bit unsigned integer in lower-case hexadecimal."""
    return uitoa_base(n, HEX)


def ultoa_base(n: int, base: str) -> str:
    """Render a 64-bit unsigned integer using the digit characters of ``base``."""
    return _unsigned_to_text(n, base, _LONG_BITS)


def ultoa(n: int) -> str:
    """Render a 64-bit unsigned integer in decimal."""
    return ultoa_base(n, DECIMAL)


def ultoa_o(n: int) -> str:
    """Render a 64-bit unsigned integer in octal."""
    return ultoa_base(n, OCTAL)


def ultoa_x(n: int) -> str:
    """Render a 64-bit unsigned integer in lower-case hexadecimal."""
    return ultoa_base(n, HEX)


def ustoa_base(n: int, base: str) -> str:
    """Render a 16-bit unsigned integer using the digit characters of ``base``."""
    return _unsigned_to_text(n, base, _SHORT_BITS)


def ustoa(n: int) -> str:
    """Render a 16-bit unsigned integer in decimal."""
    return ustoa_base(n, DECIMAL)


def ustoa_o(n: int) -> str:
    """Render a 16-bit unsigned integer in octal."""
    return ustoa_base(n, OCTAL)


def ustoa_x(n: int) -> str:
    """Render a 16-bit unsigned integer in lower-case hexadecimal."""
    return ustoa_base(n, HEX)