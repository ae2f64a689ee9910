"""A growable byte buffer that can also be filled one bit at a time."""

from __future__ import annotations

from collections.abc import Iterable


class BytesData:
    """Bytes plus a count of bits pushed with :meth:`push_bit`.

    Bits are stored most significant first. Whole bytes pushed with
    :meth:`push_byte` do not change the bit count.
    """

    def __init__(self, data: Iterable[int] = b""):
        self._data = bytearray(data)
        self._bits_count = 0

    def push_byte(self, value: int, count: int = 1) -> None:
        """Append ``value`` as a whole byte ``count`` times."""
        self._data.extend(bytes([value]) * count)

    def byte_at(self, index: int) -> int:
        return self._data[index]

    def push_bit(self, value: int, count: int = 1) -> None:
        """Append the bit ``value`` ``count`` times."""
        for _ in range(count):
            if self.is_byte_aligned():
                self._data.append(0)
            offset = 7 - self._bits_count % 8
            self._data[-1] |= (value << offset) & 0xFF
            self._bits_count += 1

    def bit_at(self, index: int) -> int:
        byte_value = self._data[index // 8]
        return (byte_value >> (7 - index % 8)) & 0x01

    @property
    def bits_count(self) -> int:
        return self._bits_count

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def set_data(self, data: Iterable[int]) -> None:
        """Replace the stored bytes; the bit count is left as it is."""
        self._data = bytearray(data)

    def is_byte_aligned(self) -> bool:
        return self._bits_count % 8 == 0

    def fill_last_byte(self, value: int) -> None:
        """Push ``value`` bits until the bit count is a multiple of eight."""
        while not self.is_byte_aligned():
            self.push_bit(value)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"BytesData({bytes(self._data)!r}, bits_count={self._bits_count})"