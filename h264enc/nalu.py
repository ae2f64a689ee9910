"""NAL unit types and serialisation of NAL units to a stream."""

from __future__ import annotations

from enum import IntEnum

from .bytesdata import BytesData
from .coding import ZERO_BYTES_START_CODE, sodb_to_ebsp, u_1, u_v
from .streams import OStream


class NaluType(IntEnum):
    IDR = 5
    SPS = 7
    PPS = 8


class NaluPriority(IntEnum):
    DISPOSABLE = 0
    LOW = 1
    HIGH = 2
    HIGHEST = 3


_TYPE_NAMES = {NaluType.IDR: "IDR", NaluType.SPS: "SPS", NaluType.PPS: "PPS"}
_PRIORITY_NAMES = {
    NaluPriority.DISPOSABLE: "Disposable",
    NaluPriority.LOW: "Low",
    NaluPriority.HIGH: "High",
    NaluPriority.HIGHEST: "Highest",
}


def format_nalu_type(nalu_type: int) -> str:
    """Readable name of a NAL unit type, or ``Unknown``."""
    return _TYPE_NAMES.get(nalu_type, "Unknown")


def format_nalu_priority(nalu_priority: int) -> str:
    """Readable name of a NAL reference priority, or ``Unknown``."""
    return _PRIORITY_NAMES.get(nalu_priority, "Unknown")


class Nalu:
    """A NAL unit: a header plus an escaped payload."""

    def __init__(self, nalu_type: NaluType, nalu_priority: NaluPriority):
        self.type = NaluType(nalu_type)
        self.priority = NaluPriority(nalu_priority)
        self.data: BytesData | None = None

    def set_data(self, bytes_data: BytesData) -> None:
        """Set the payload from a raw bit string, escaping it."""
        self.data = sodb_to_ebsp(bytes_data)

    def serial(self, ostream: OStream) -> None:
        """Write the start code, header and payload to ``ostream``."""
        if self.data is None:
            raise ValueError("NAL unit has no payload")
        header = BytesData()
        header.push_byte(0, ZERO_BYTES_START_CODE)
        header.push_byte(1)
        u_1(0, header)  # forbidden_zero_bit
        u_v(2, self.priority, header)  # nal_ref_idc
        u_v(5, self.type, header)  # nal_unit_type
        ostream.push_bytes_data(header)
        ostream.push_bytes_data(self.data)

    def __repr__(self) -> str:
        return f"Nalu(type={format_nalu_type(self.type)}, priority={format_nalu_priority(self.priority)})"