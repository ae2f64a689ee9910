"""Small file helpers."""

from __future__ import annotations

import os
import shutil


def file_exists(path: str | os.PathLike) -> bool:
    """Return whether ``path`` exists."""
    return os.path.exists(path)


def duplicate_file(source: str | os.PathLike, target: str | os.PathLike) -> None:
    """Copy ``source`` to ``target``, overwriting it; raise OSError on failure."""
    shutil.copyfile(source, target)


def read_lines(path: str | os.PathLike) -> list[str]:
    """Return the lines of a text file without their line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def write_file(data: bytes | bytearray | memoryview, path: str | os.PathLike) -> None:
    """Write ``data`` to ``path``; empty data leaves the file system untouched."""
    payload = bytes(data)
    if not payload:
        return
    with open(path, "wb") as handle:
        handle.write(payload)