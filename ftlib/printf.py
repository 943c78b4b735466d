"""A small printf-style formatter with the conversions ``c s p d i u x X %``.

Conversions behave as they do for 32-bit C integers: ``%d`` and ``%i``
print a signed 32-bit value, while ``%u``, ``%x`` and ``%X`` print the
argument reduced to an unsigned 32-bit value. ``%s`` prints ``(null)``
for None, and ``%p`` prints ``(nil)`` for None or 0. A ``%`` followed by
any other character, or standing at the very end, produces no output and
consumes no argument. Arguments beyond those the format uses are ignored.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_INT_MODULUS = 1 << 32
_INT_HALF = 1 << 31
_POINTER_MODULUS = 1 << 64


def _require_int(spec: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value %= _INT_MODULUS
    return value - _INT_MODULUS if value >= _INT_HALF else value


def _unsigned32(value: int) -> int:
    return value % _INT_MODULUS


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)} characters")
        return value
    return chr(_require_int("c", value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, bool):
        raise TypeError("%p does not accept bool")
    address = value if isinstance(value, int) else id(value)
    address %= _POINTER_MODULUS
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return _format_pointer(value)
    number = _require_int(spec, value)
    if spec in "di":
        return str(_signed32(number))
    if spec == "u":
        return str(_unsigned32(number))
    if spec == "x":
        return format(_unsigned32(number), "x")
    return format(_unsigned32(number), "X")


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    remaining = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream`` and return the number of characters written."""
    text = format_string(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    return fprintf(sys.stdout, fmt, *args)


def eprintf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard error and return its length."""
    return fprintf(sys.stderr, fmt, *args)