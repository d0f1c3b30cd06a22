"""A small printf supporting %c %s %p %d %i %u %x %X."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_INT_BITS = 32
_POINTER_BITS = 64
_NULL_STRING = "(null)"


def count_digits(number: int, base: int) -> int:
    """Number of digits of a non-negative ``number`` in ``base``; 0 has none."""
    if base < 2:
        raise ValueError("base must be at least 2")
    if number < 0:
        raise ValueError("number must not be negative")
    count = 0
    while number:
        number //= base
        count += 1
    return count


def _to_signed(number: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (int(number) + half) % (1 << bits) - half


def _to_unsigned(number: int, bits: int) -> int:
    return int(number) % (1 << bits)


def format_int(number: int) -> str:
    """Decimal form of ``number`` taken as a 32-bit signed int."""
    return str(_to_signed(number, _INT_BITS))


def format_unsigned(number: int) -> str:
    """Decimal form of ``number`` taken as a 32-bit unsigned int."""
    return str(_to_unsigned(number, _INT_BITS))


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal form of ``number`` taken as a 32-bit unsigned int."""
    value = _to_unsigned(number, _INT_BITS)
    return f"{value:X}" if upper else f"{value:x}"


def format_pointer(number: int) -> str:
    """Address form ``0x...`` of ``number`` taken as a 64-bit unsigned value."""
    return f"0x{_to_unsigned(number, _POINTER_BITS):x}"


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c expects a single character")
        return arg
    return chr(_to_unsigned(arg, 8))


def _format_str(arg: Any) -> str:
    return _NULL_STRING if arg is None else str(arg)


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_str,
    "p": format_pointer,
    "u": format_unsigned,
    "d": format_int,
    "i": format_int,
    "x": lambda arg: format_hex(arg, False),
    "X": lambda arg: format_hex(arg, True),
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions of ``fmt`` with ``args``.

    An unknown conversion character, ``%`` included, stands for itself.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            pieces.append(spec)
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(convert(arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded ``fmt`` to ``stream`` (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)