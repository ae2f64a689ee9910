"""Encoder settings and reading them from a configuration file."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .configutil import parse_config

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_STRING_KEYS = ("input_file_path", "output_file_path")
_INT_KEYS = (
    "width",
    "height",
    "frames_to_encode",
    "profile_idc",
    "level_idc",
    "ref_frame_number",
)


@dataclass
class EncoderConfig:
    """Settings that drive one encoding run."""

    input_file_path: str = ""
    output_file_path: str = ""
    width: int = 0
    height: int = 0
    frames_to_encode: int = 0
    profile_idc: int = 0
    level_idc: int = 0
    ref_frame_number: int = 0


def _parse_int(name: str, text: str) -> int:
    """Read the integer that ``text`` starts with, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"configuration entry {name!r} is not an integer: {text!r}")
    return int(match.group(1))


def _require(config_map: Mapping[str, str], name: str) -> str:
    try:
        return config_map[name]
    except KeyError:
        raise KeyError(f"missing configuration entry {name!r}") from None


def parse_config_map(config_map: Mapping[str, str]) -> EncoderConfig:
    """Build an :class:`EncoderConfig` from name/value pairs.

    Raises KeyError for the first required entry that is missing and
    ValueError for a numeric entry that does not start with an integer.
    """
    values: dict[str, str | int] = {}
    for name in _STRING_KEYS:
        values[name] = _require(config_map, name)
    for name in _INT_KEYS:
        values[name] = _parse_int(name, _require(config_map, name))
    return EncoderConfig(**values)


def read_encoder_config(path: str | os.PathLike) -> EncoderConfig:
    """Read encoder settings from a ``name = value`` file."""
    return parse_config_map(parse_config(path))