"""Buffered line reading from a file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 10


class LineReader:
    """Read a file descriptor one line at a time.

    Each line keeps its terminating newline; the last line may lack one.
    Data beyond the current line is kept for the next call.
    """

    def __init__(self, fd, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if not isinstance(fd, int) and hasattr(fd, "fileno"):
            fd = fd.fileno()
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                return
            self._pending += chunk

    def next_line(self) -> str | None:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        head, newline, rest = self._pending.partition(b"\n")
        self._pending = rest
        return (head + newline).decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line