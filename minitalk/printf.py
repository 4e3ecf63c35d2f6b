"""Formatted output and small writers for characters, strings and numbers.

The format language knows ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. Any other character after ``%`` is written as is,
together with the ``%``, and takes no argument. Integers behave as in a
32-bit machine type, and pointers as 64-bit unsigned addresses.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, Sequence, TextIO

_INT_BITS = 32
_POINTER_BITS = 64


class FormatError(ValueError):
    """A format string ends in a lone ``%`` or has too few arguments."""


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Reduce ``value`` to a ``bits``-wide integer."""
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _integer(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, not {type(value).__name__}")
    return int(value)


def _char(value: Any) -> str:
    """A one-character string, or an integer code truncated to one byte."""
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(_integer(value) & 0xFF)


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _convert(spec: str, take: Callable[[], Any]) -> str:
    """Text for one conversion ``spec``; ``take`` fetches the next argument."""
    if spec == "c":
        return _char(take())
    if spec == "s":
        value = take()
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"expected a string argument, not {type(value).__name__}")
        return value
    if spec in ("d", "i"):
        return str(_wrap(_integer(take()), _INT_BITS, signed=True))
    if spec == "u":
        return str(_wrap(_integer(take()), _INT_BITS, signed=False))
    if spec in ("x", "X"):
        return format(_wrap(_integer(take()), _INT_BITS, signed=False), spec)
    if spec == "p":
        value = take()
        address = 0 if value is None else _wrap(_integer(value), _POINTER_BITS, signed=False)
        return "(nil)" if address == 0 else f"0x{address:x}"
    if spec == "%":
        return "%"
    return "%" + spec


def _pieces(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    """Yield the output of ``fmt`` piece by piece, raising at the first error."""
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")

        def take(spec: str = spec) -> Any:
            try:
                return next(remaining)
            except StopIteration:
                raise FormatError(f"missing argument for '%{spec}'") from None

        yield _convert(spec, take)


def format_string(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write for ``fmt`` and ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write formatted text to ``stream`` (standard output by default).

    Returns the number of characters written. On a :class:`FormatError` the
    text before the fault has already been written.
    """
    out = _out(stream)
    written = 0
    for piece in _pieces(fmt, args):
        out.write(piece)
        written += len(piece)
    return written


def put_char(c: Any, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer code is truncated to one byte."""
    _out(stream).write(_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, not {type(s).__name__}")
    _out(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _out(stream).write(str(_wrap(_integer(n), _INT_BITS, signed=True)))