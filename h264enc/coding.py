"""Bit-level syntax element writers and NAL payload encapsulation."""

from __future__ import annotations

from .bytesdata import BytesData

ZERO_BYTES_SHORT_START_CODE = 2
ZERO_BYTES_START_CODE = 3
EMULATION_PREVENTION_BYTE = 0x03


def u_1(value: int, bytes_data: BytesData) -> int:
    """Write a one-bit flag; any non-zero value is written as 1."""
    bytes_data.push_bit(1 if value else 0)
    return 1


def u_v(n: int, value: int, bytes_data: BytesData) -> int:
    """Write the low ``n`` bits of ``value``, most significant first."""
    if n < 0:
        raise ValueError(f"bit count must not be negative, got {n}")
    for index in reversed(range(n)):
        bytes_data.push_bit((value >> index) & 1)
    return n


def binary_length(value: int) -> int:
    """Number of bits needed to write ``value``; zero needs none."""
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    return value.bit_length()


def ue_v(value: int, bytes_data: BytesData) -> int:
    """Write ``value`` as an unsigned Exp-Golomb code; return the bits written."""
    if value < 0:
        raise ValueError(f"ue(v) needs a non-negative value, got {value}")
    code = value + 1
    prefix_length = binary_length(code) - 1
    bytes_data.push_bit(0, prefix_length)
    u_v(prefix_length + 1, code, bytes_data)
    return prefix_length * 2 + 1


def se_v(value: int, bytes_data: BytesData) -> int:
    """Write ``value`` as a signed Exp-Golomb code; return the bits written."""
    mapped = -2 * value if value <= 0 else 2 * value - 1
    return ue_v(mapped, bytes_data)


def _sodb_to_rbsp(bytes_data: BytesData) -> None:
    bytes_data.push_bit(1)
    bytes_data.fill_last_byte(0)


def _rbsp_to_ebsp(rbsp: bytes) -> bytes:
    out = bytearray()
    zero_count = 0
    for value in rbsp:
        if zero_count == ZERO_BYTES_SHORT_START_CODE:
            out.append(EMULATION_PREVENTION_BYTE)
            zero_count = 0
        out.append(value)
        zero_count = zero_count + 1 if value == 0 else 0
    return bytes(out)


def sodb_to_ebsp(bytes_data: BytesData) -> BytesData:
    """Turn a raw bit string into an escaped NAL payload.

    The stop bit and zero padding are appended to ``bytes_data`` itself;
    the escaped payload is returned as a new buffer, with an emulation
    prevention byte inserted after every run of two zero bytes.
    """
    _sodb_to_rbsp(bytes_data)
    return BytesData(_rbsp_to_ebsp(bytes_data.data))