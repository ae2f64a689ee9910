"""Output byte streams that NAL units are written to."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import BinaryIO

from .bytesdata import BytesData


class OStream(ABC):
    """A sink for byte buffers; usable as a context manager that closes it."""

    @abstractmethod
    def open(self) -> None:
        """Make the stream ready for writing; raise OSError on failure."""

    @abstractmethod
    def push_bytes_data(self, bytes_data: BytesData) -> None:
        """Append the bytes held by ``bytes_data``."""

    @abstractmethod
    def flush(self) -> None:
        """Push buffered bytes to their destination."""

    @abstractmethod
    def close(self) -> None:
        """Release the stream."""

    def __enter__(self) -> OStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileOStream(OStream):
    """Writes byte buffers to a binary file, replacing its contents."""

    def __init__(self, path: str | os.PathLike):
        self.path = os.fspath(path)
        self._handle: BinaryIO | None = None

    def open(self) -> None:
        self._handle = open(self.path, "wb")

    def _require_handle(self) -> BinaryIO:
        if self._handle is None:
            raise ValueError(f"stream for {self.path!r} is not open")
        return self._handle

    def push_bytes_data(self, bytes_data: BytesData) -> None:
        self._require_handle().write(bytes(bytes_data))

    def flush(self) -> None:
        self._require_handle().flush()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None


def create_file_ostream(path: str | os.PathLike) -> FileOStream:
    """Open a file stream at ``path``; raise OSError if it cannot be opened."""
    stream = FileOStream(path)
    stream.open()
    return stream