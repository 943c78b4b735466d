"""String transformations: trimming, splitting, mapping and integer conversion."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import TypeVar

T = TypeVar("T")

_WHITESPACE = " \f\n\r\t\v"
_INT_BITS = 32
_LONG_MAX_DIGITS = "9223372036854775807"
_LONG_MIN_DIGITS = "9223372036854775808"


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` that occurs in ``charset``."""
    _require_str("s", s)
    _require_str("charset", charset)
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces.

    A NUL separator never matches, so a non-empty string comes back whole.
    """
    _require_str("s", s)
    _require_str("sep", sep)
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {len(sep)} characters")
    if sep == "\0":
        return [s] if s else []
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character of ``s``."""
    _require_str("s", s)
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(buf: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace each item of ``buf`` in place with ``func(index, item)``."""
    if func is None:
        raise TypeError("func must be callable")
    for index, item in enumerate(buf):
        buf[index] = func(index, item)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the signed 32-bit range, as C ``int`` arithmetic does."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def _overflows(digits: str, negative: bool) -> bool:
    """True if the digit run does not fit in a signed 64-bit value."""
    if len(digits) != len(_LONG_MAX_DIGITS):
        return len(digits) > len(_LONG_MAX_DIGITS)
    limit = _LONG_MIN_DIGITS if negative else _LONG_MAX_DIGITS
    return digits > limit


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped and one ``+`` or ``-`` sign is accepted.
    A digit run too long for a signed 64-bit value yields -1 when positive
    and 0 when negative; other results are reduced to a 32-bit ``int``.
    """
    _require_str("s", s)
    rest = s.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    end = 0
    while end < len(rest) and "0" <= rest[end] <= "9":
        end += 1
    digits = rest[:end]
    if _overflows(digits, negative):
        return 0 if negative else -1
    value = int(digits) if digits else 0
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)