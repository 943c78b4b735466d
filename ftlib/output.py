"""Writing characters, strings and integers to text streams.

Each function writes to ``stream`` when given, otherwise to standard output.
"""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character, given as a one-character string or a byte code."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif not isinstance(c, str):
        raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))