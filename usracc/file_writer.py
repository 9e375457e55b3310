"""Binary writes to a file, at its end or at a given offset."""

from __future__ import annotations

import os
import stat

_MODE = stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP | stat.S_IROTH


class FileWriter:
    """Writes raw bytes into a file that is created if missing, never truncated."""

    def __init__(self):
        self._fd: int | None = None
        self.path: str = ""

    @property
    def is_open(self) -> bool:
        """Whether a file is currently open."""
        return self._fd is not None

    def open(self, path) -> None:
        """Open ``path`` for reading and writing, closing any previous file."""
        self.close()
        self.path = os.fspath(path)
        self._fd = os.open(self.path, os.O_CREAT | os.O_RDWR, _MODE)

    def close(self) -> None:
        """Close the file if one is open."""
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def _require_fd(self) -> int:
        if self._fd is None:
            raise ValueError("no file is open")
        return self._fd

    def append(self, data: bytes) -> int:
        """Write ``data`` at the end of the file; return the bytes written."""
        fd = self._require_fd()
        view = memoryview(data)
        written = 0
        while written < len(view):
            os.lseek(fd, 0, os.SEEK_END)
            count = os.write(fd, view[written:])
            if count == 0:
                break
            written += count
        return written

    def write_at(self, data: bytes, offset: int) -> int:
        """Write ``data`` starting at ``offset``; return the bytes written."""
        if offset < 0:
            raise ValueError("offset must not be negative")
        fd = self._require_fd()
        view = memoryview(data)
        written = 0
        while written < len(view):
            os.lseek(fd, offset + written, os.SEEK_SET)
            count = os.write(fd, view[written:])
            if count == 0:
                break
            written += count
        return written

    def length(self) -> int:
        """Current size of the file, leaving the file position unchanged."""
        fd = self._require_fd()
        position = os.lseek(fd, 0, os.SEEK_CUR)
        size = os.lseek(fd, 0, os.SEEK_END)
        os.lseek(fd, position, os.SEEK_SET)
        return size

    def __enter__(self) -> "FileWriter":
        return self

    def __exit__(self, *args) -> None:
        self.close()