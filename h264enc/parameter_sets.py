"""Building and writing the parameter sets of a stream."""

from __future__ import annotations

from .config import EncoderConfig
from .nalu import Nalu, NaluPriority, NaluType
from .sps import SPS
from .streams import OStream

MACROBLOCK_SIZE = 16


class ParameterSetMgr:
    """Derives parameter sets from encoder settings and serialises them."""

    def __init__(self) -> None:
        self.config: EncoderConfig | None = None
        self.sps: SPS | None = None

    def init_config(self, config: EncoderConfig) -> None:
        self.config = config

    def construct_sps(self) -> SPS:
        """Create the sequence parameter set from the current settings."""
        config = self.config
        if config is None:
            raise RuntimeError("no encoder configuration has been set")
        width_mbs = config.width // MACROBLOCK_SIZE
        height_mbs = config.height // MACROBLOCK_SIZE
        if width_mbs < 1 or height_mbs < 1:
            raise ValueError(
                f"frame {config.width}x{config.height} is smaller than one macroblock"
            )
        sps = SPS()
        data = sps.data
        data.profile_idc = config.profile_idc
        data.level_idc = config.level_idc
        data.max_num_ref_frames = config.ref_frame_number
        data.pic_width_in_mbs_minus1 = width_mbs - 1
        data.pic_height_in_map_units_minus1 = height_mbs - 1
        self.sps = sps
        return sps

    def serial_sps(self, ostream: OStream) -> None:
        """Write the sequence parameter set as a NAL unit to ``ostream``."""
        if self.sps is None:
            raise RuntimeError("the sequence parameter set has not been constructed")
        nalu = Nalu(NaluType.SPS, NaluPriority.HIGHEST)
        nalu.set_data(self.sps.encapsulate())
        nalu.serial(ostream)