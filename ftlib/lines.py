"""Reading a file descriptor one line at a time.

Lines are returned as ``bytes`` and keep their trailing newline. A last
line without a newline is returned as it is, and ``None`` marks the end of
the input. Data read past the end of a line is kept for the next call, so
a descriptor can be read line by line while reading many descriptors in
turn.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 42
FD_COUNT = 4098


class LineReader:
    """Split the data read from a file descriptor into lines."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        """Read chunks until the pending data holds a newline or the input ends."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> bytes | None:
        """Return the next line, newline included, or None at the end of the input."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        if end < 0:
            line = bytes(self._pending)
            self._pending.clear()
            return line
        line = bytes(self._pending[: end + 1])
        del self._pending[: end + 1]
        return line

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of ``fd``, keeping unread data between calls.

    Returns None for a negative descriptor and at the end of the input.
    """
    if fd < 0:
        return None
    if fd >= FD_COUNT:
        raise ValueError(f"file descriptor {fd} is out of range (limit {FD_COUNT})")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    return reader.read_line()