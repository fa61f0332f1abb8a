"""Reading text one line at a time from file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 64

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _decode(data: bytes) -> str:
    return data.decode(_ENCODING, _ERRORS)


class LineReader:
    """Read lines from a file descriptor through a buffer of fixed size.

    Each line keeps its trailing newline; the last line of the input may
    lack one. Reading never goes further than needed for the next line.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    @property
    def buffered(self) -> int:
        """Number of bytes read from the descriptor but not yet returned."""
        return len(self._pending)

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` once the input is exhausted.

        ``OSError`` from the underlying read is propagated.
        """
        while True:
            newline = self._pending.find(b"\n")
            if newline >= 0:
                line = bytes(self._pending[: newline + 1])
                del self._pending[: newline + 1]
                return _decode(line)
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        line = bytes(self._pending)
        self._pending.clear()
        return _decode(line)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line of ``fd``, or ``None`` at the end of input.

    Unread data is kept per descriptor between calls, so several
    descriptors can be read in turn.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None or not reader.buffered:
        _readers.pop(fd, None)
    return line