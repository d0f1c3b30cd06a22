"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os

BUFFER_SIZE = 5


class LineReader:
    """Line-by-line reader that keeps unread data separately for each descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._stashes: dict[int, bytes] = {}

    def next_line(self, fd: int) -> str | None:
        """The next line of ``fd`` with its newline, or None at end of input or on error.

        The last line of the input is returned without a newline if it has none.
        Anything after a NUL byte within one read is ignored.
        """
        if fd < 0:
            return None
        try:
            os.read(fd, 0)
        except OSError:
            self.reset(fd)
            return None
        stash = self._stashes.pop(fd, b"")
        while b"\n" not in stash:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                break
            if not chunk:
                break
            stash += chunk.split(b"\0", 1)[0]
        if not stash:
            return None
        cut = stash.find(b"\n")
        end = len(stash) if cut < 0 else cut + 1
        line, rest = stash[:end], stash[end:]
        if rest:
            self._stashes[fd] = rest
        return line.decode("utf-8", errors="replace")

    def reset(self, fd: int) -> None:
        """Forget any data kept for ``fd``."""
        self._stashes.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> str | None:
    """The next line of ``fd`` using a shared reader with the default buffer size."""
    return _default_reader.next_line(fd)