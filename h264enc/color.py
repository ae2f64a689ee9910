"""Colour values, decoded image data and RGB to YUV conversion."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .mathutil import clamp


@dataclass(frozen=True)
class RGB:
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int


class ColorData:
    """Interleaved pixel data of a decoded image.

    A ``ColorData()`` built without arguments is an empty, invalid image.
    """

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        channel_num: int | None = None,
        data: Iterable[int] | None = None,
    ):
        if width is None:
            self.valid = False
            self.width = 0
            self.height = 0
            self.channel_num = 0
            self.data = b""
            return
        if height is None or channel_num is None or data is None:
            raise TypeError("width, height, channel_num and data must be given together")
        if width < 0 or height < 0 or channel_num < 0:
            raise ValueError("image dimensions must not be negative")
        size = width * height * channel_num
        raw = bytes(data)
        if len(raw) < size:
            raise ValueError(f"expected at least {size} bytes of pixel data, got {len(raw)}")
        self.valid = True
        self.width = width
        self.height = height
        self.channel_num = channel_num
        self.data = raw[:size]

    def __repr__(self) -> str:
        return (
            f"ColorData(width={self.width}, height={self.height}, "
            f"channel_num={self.channel_num}, valid={self.valid})"
        )


def rgb_to_yuv709_full(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert an RGB pixel to full-range BT.709 Y, U and V in 0..255."""
    y = int(0.2126 * r + 0.7152 * g + 0.0722 * b + 0.5)
    u = int(-0.1146 * r - 0.3854 * g + 0.5 * b + 128 + 0.5)
    v = int(0.5 * r - 0.4542 * g - 0.0458 * b + 128 + 0.5)
    return clamp(y, 0, 255), clamp(u, 0, 255), clamp(v, 0, 255)