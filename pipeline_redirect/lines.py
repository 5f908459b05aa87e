"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["DEFAULT_BUFFER_SIZE", "LineReader"]

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Read newline-terminated lines from a raw file descriptor.

    Data is pulled with ``os.read`` in chunks of *buffer_size* bytes.
    Anything read past the end of the returned line is kept for the next
    call, so no input is lost between lines.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> str | None:
        """Return the next line, newline included, or None at end of input."""
        while b"\n" not in self._pending:
            chunk = os.read(self._fd, self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        if end < 0:
            line, self._pending = self._pending, b""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1:]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line