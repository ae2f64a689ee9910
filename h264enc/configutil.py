"""Parsing of ``name = value`` configuration files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from .fileutil import read_lines

_LINE_PATTERN = re.compile(r"\s*([^\s=]+)\s*=\s*([^\s=]+)\s*")
_COMMENT_PREFIX = "//"


def parse_line(line: str) -> tuple[str, str] | None:
    """Return the ``(name, value)`` pair found in ``line``, or None."""
    match = _LINE_PATTERN.search(line)
    if match is None:
        return None
    return match.group(1), match.group(2)


def parse_lines(lines: Iterable[str]) -> dict[str, str]:
    """Collect name/value pairs, skipping ``//`` comments; later names win."""
    config: dict[str, str] = {}
    for line in lines:
        if line.startswith(_COMMENT_PREFIX):
            continue
        pair = parse_line(line)
        if pair is not None:
            name, value = pair
            config[name] = value
    return config


def parse_config(path: str | os.PathLike) -> dict[str, str]:
    """Read a configuration file; raise OSError if it cannot be read."""
    return parse_lines(read_lines(path))