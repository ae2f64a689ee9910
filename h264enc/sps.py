"""Sequence parameter set fields and their bitstream form."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bytesdata import BytesData
from .coding import u_1, u_v, ue_v


@dataclass
class SPSData:
    """Syntax elements of a sequence parameter set."""

    profile_idc: int = 0  # u(8); 66 = baseline, 77 = main
    constraint_set0_flag: int = 0
    constraint_set1_flag: int = 0
    constraint_set2_flag: int = 0
    constraint_set3_flag: int = 0
    constraint_set4_flag: int = 0
    constraint_set5_flag: int = 0
    reserved_zero_2bits: int = 0
    level_idc: int = 0  # u(8)
    seq_parameter_set_id: int = 0

    log2_max_frame_num_minus4: int = 0
    pic_order_cnt_type: int = 0
    log2_max_pic_order_cnt_lsb_minus4: int = 0
    max_num_ref_frames: int = 0
    gaps_in_frame_num_value_allowed_flag: int = 0
    pic_width_in_mbs_minus1: int = 0
    pic_height_in_map_units_minus1: int = 0
    frame_mbs_only_flag: int = 1
    direct_8x8_inference_flag: int = 0
    frame_cropping_flag: int = 0
    vui_parameters_present_flag: int = 0

    def to_bytes_data(self) -> BytesData:
        """Write the fields, in bitstream order, to a new buffer."""
        bd = BytesData()
        u_v(8, self.profile_idc, bd)
        u_1(self.constraint_set0_flag, bd)
        u_1(self.constraint_set1_flag, bd)
        u_1(self.constraint_set2_flag, bd)
        u_1(self.constraint_set3_flag, bd)
        u_1(self.constraint_set4_flag, bd)
        u_1(self.constraint_set5_flag, bd)
        u_v(2, self.reserved_zero_2bits, bd)
        u_v(8, self.level_idc, bd)
        ue_v(self.seq_parameter_set_id, bd)

        ue_v(self.log2_max_frame_num_minus4, bd)
        ue_v(self.pic_order_cnt_type, bd)
        ue_v(self.log2_max_pic_order_cnt_lsb_minus4, bd)
        ue_v(self.max_num_ref_frames, bd)
        u_1(self.gaps_in_frame_num_value_allowed_flag, bd)
        ue_v(self.pic_width_in_mbs_minus1, bd)
        ue_v(self.pic_height_in_map_units_minus1, bd)
        u_1(self.frame_mbs_only_flag, bd)
        u_1(self.direct_8x8_inference_flag, bd)
        u_1(self.frame_cropping_flag, bd)
        u_1(self.vui_parameters_present_flag, bd)
        return bd


@dataclass
class SPS:
    """A sequence parameter set holding its field values."""

    data: SPSData = field(default_factory=SPSData)

    def encapsulate(self) -> BytesData:
        """Return the raw bit string of the parameter set."""
        return self.data.to_bytes_data()