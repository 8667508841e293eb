"""Buffered line reading from raw file descriptors, one buffer per descriptor."""

from __future__ import annotations

import os
from typing import Iterator

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 5


class LineReader:
    """Read newline-terminated lines from file descriptors.

    Data is pulled with ``os.read`` in chunks of ``buffer_size`` bytes. Bytes
    read past the end of a line are kept for the next call on the same
    descriptor, so several descriptors can be read in turn.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, newline included.

        The last line of the input may lack a newline. Returns ``None`` once
        the input is exhausted. A failed read discards what was buffered for
        ``fd`` and re-raises the ``OSError``.
        """
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        storage = self._pending.pop(fd, b"")
        while b"\n" not in storage:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                raise
            if not chunk:
                break
            storage += chunk
        if not storage:
            return None
        line, sep, rest = storage.partition(b"\n")
        if rest:
            self._pending[fd] = rest
        return line + sep

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield every remaining line of ``fd``."""
        while (line := self.next_line(fd)) is not None:
            yield line