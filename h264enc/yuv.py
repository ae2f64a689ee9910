"""Planar YUV frames: conversion from RGB and raw ``.yuv`` file I/O."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from .color import ColorData, rgb_to_yuv709_full
from .mathutil import average

Planes = tuple[bytes, bytes, bytes]


def convert_to_yuv444p(width: int, height: int, channel_num: int, data: Sequence[int]) -> Planes:
    """Convert interleaved RGB(A) pixels to full-resolution Y, U and V planes."""
    if channel_num < 3:
        raise ValueError(f"at least 3 channels are needed, got {channel_num}")
    size = width * height
    if len(data) < size * channel_num:
        raise ValueError(f"expected {size * channel_num} bytes of pixel data, got {len(data)}")
    y_plane = bytearray()
    u_plane = bytearray()
    v_plane = bytearray()
    for start in range(0, size * channel_num, channel_num):
        r, g, b = data[start : start + 3]
        y, u, v = rgb_to_yuv709_full(r, g, b)
        y_plane.append(y)
        u_plane.append(u)
        v_plane.append(v)
    return bytes(y_plane), bytes(u_plane), bytes(v_plane)


def _subsample(plane: bytes, width: int, height: int) -> bytes:
    out = bytearray()
    for row in range(0, height - 1, 2):
        top = plane[row * width : (row + 1) * width]
        bottom = plane[(row + 1) * width : (row + 2) * width]
        for col in range(0, width - 1, 2):
            out.append(average([top[col], bottom[col], top[col + 1], bottom[col + 1]]))
    return bytes(out)


def convert_to_yuv420p(width: int, height: int, channel_num: int, data: Sequence[int]) -> Planes:
    """Convert interleaved RGB(A) pixels to YUV 4:2:0 planes.

    Chroma is the rounded mean of each 2x2 block; a trailing odd row or
    column is dropped from the chroma planes.
    """
    y_plane, u_444, v_444 = convert_to_yuv444p(width, height, channel_num, data)
    return y_plane, _subsample(u_444, width, height), _subsample(v_444, width, height)


def _plane_sizes(width: int, height: int) -> tuple[int, int]:
    luma = width * height
    return luma, luma // 4


def write_yuv420p(
    width: int,
    height: int,
    path: str | os.PathLike,
    y_data: bytes,
    u_data: bytes,
    v_data: bytes,
) -> None:
    """Write the three planes one after another to ``path``."""
    luma, chroma = _plane_sizes(width, height)
    with open(path, "wb") as handle:
        handle.write(bytes(y_data[:luma]))
        handle.write(bytes(u_data[:chroma]))
        handle.write(bytes(v_data[:chroma]))


def read_yuv420p(width: int, height: int, path: str | os.PathLike) -> Planes:
    """Read Y, U and V planes of a ``width`` x ``height`` frame from ``path``."""
    luma, chroma = _plane_sizes(width, height)
    with open(path, "rb") as handle:
        y_data = handle.read(luma)
        u_data = handle.read(chroma)
        v_data = handle.read(chroma)
    if len(y_data) < luma or len(u_data) < chroma or len(v_data) < chroma:
        raise ValueError(f"{os.fspath(path)!r} is too short for a {width}x{height} frame")
    return y_data, u_data, v_data


@dataclass
class YUVFrame:
    """A YUV 4:2:0 planar frame."""

    width: int = 0
    height: int = 0
    y_data: bytes = b""
    u_data: bytes = b""
    v_data: bytes = b""

    @classmethod
    def from_color_data(cls, color_data: ColorData) -> YUVFrame:
        """Build a frame by converting decoded RGB(A) image data."""
        planes = convert_to_yuv420p(
            color_data.width, color_data.height, color_data.channel_num, color_data.data
        )
        return cls(color_data.width, color_data.height, *planes)

    @classmethod
    def from_file(cls, width: int, height: int, path: str | os.PathLike) -> YUVFrame:
        """Load a frame of the given size from a raw ``.yuv`` file."""
        frame = cls()
        frame.load(width, height, path)
        return frame

    def save(self, path: str | os.PathLike) -> None:
        """Write the frame to ``path`` as raw planar YUV 4:2:0."""
        write_yuv420p(self.width, self.height, path, self.y_data, self.u_data, self.v_data)

    def load(self, width: int, height: int, path: str | os.PathLike) -> None:
        """Replace the frame contents with a frame read from ``path``."""
        self.y_data, self.u_data, self.v_data = read_yuv420p(width, height, path)
        self.width = width
        self.height = height