"""Character classification and case conversion for the ASCII range.

Every function accepts either an integer character code or a one-character
string. Classification functions return ``bool``. Conversion functions
return the same kind of value they were given.
"""

from __future__ import annotations

from typing import overload


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, which is an int or a one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True if ``c`` is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


@overload
def to_upper(c: int) -> int: ...
@overload
def to_upper(c: str) -> str: ...


def to_upper(c: int | str) -> int | str:
    """Convert an ASCII lowercase letter to uppercase; leave anything else as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: int) -> int: ...
@overload
def to_lower(c: str) -> str: ...


def to_lower(c: int | str) -> int | str:
    """Convert an ASCII uppercase letter to lowercase; leave anything else as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code