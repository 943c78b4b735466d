"""String operations over Python ``str`` values.

Positions are returned as indices into the string, or ``None`` where
nothing was found. Functions that fill a bounded destination return the
new destination string together with the length the full result would
have had, so callers can detect truncation.
"""

from __future__ import annotations

NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; integer codes are taken modulo 256."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination that holds ``size`` bytes including the terminator.

    Returns the new destination and ``len(src)``. With ``size`` 0 the
    destination is left as it was.
    """
    _check_size("size", size)
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a total capacity of ``size`` including the terminator.

    Returns the new destination and the length the concatenation was meant
    to have. When ``size`` does not exceed ``len(dst)``, the destination is
    unchanged and the length reported is ``len(src) + size``.
    """
    _check_size("size", size)
    if size > len(dst):
        room = size - len(dst) - 1
        return dst + src[:room], len(src) + len(dst)
    return dst, len(src) + size


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == NUL else None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of unequal character codes,
    with the end of a shorter string counting as code 0; 0 if equal.
    """
    _check_size("n", n)
    a, b = s1[:n], s2[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is no
    occurrence that ends within the limit.
    """
    _check_size("length", length)
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strdup(s: str | None) -> str | None:
    """Return a copy of ``s``; None stays None."""
    if s is None:
        return None
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of ``s`` gives an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2