import pytest

from h264enc.bytesdata import BytesData
from h264enc.coding import sodb_to_ebsp
from h264enc.config import EncoderConfig
from h264enc.parameter_sets import ParameterSetMgr
from h264enc.streams import OStream


class _MemoryStream(OStream):
    def __init__(self):
        self.chunks = []

    def open(self):
        pass

    def push_bytes_data(self, bytes_data: BytesData):
        self.chunks.append(bytes(bytes_data))

    def flush(self):
        pass

    def close(self):
        pass

    @property
    def value(self):
        return b"".join(self.chunks)


def _config(width=176, height=144):
    return EncoderConfig(
        input_file_path="in.yuv",
        output_file_path="out.264",
        width=width,
        height=height,
        frames_to_encode=1,
        profile_idc=66,
        level_idc=30,
        ref_frame_number=1,
    )


def test_construct_sps_copies_settings():
    mgr = ParameterSetMgr()
    mgr.init_config(_config())
    sps = mgr.construct_sps()
    assert mgr.sps is sps
    data = sps.data
    assert data.profile_idc == 66
    assert data.level_idc == 30
    assert data.max_num_ref_frames == 1
    assert (data.pic_width_in_mbs_minus1 + 1) * 16 == 176
    assert (data.pic_height_in_map_units_minus1 + 1) * 16 == 144


def test_construct_sps_without_config():
    with pytest.raises(RuntimeError):
        ParameterSetMgr().construct_sps()


def test_construct_sps_frame_too_small():
    mgr = ParameterSetMgr()
    mgr.init_config(_config(width=8, height=144))
    with pytest.raises(ValueError):
        mgr.construct_sps()


def test_serial_sps_before_construct():
    mgr = ParameterSetMgr()
    mgr.init_config(_config())
    with pytest.raises(RuntimeError):
        mgr.serial_sps(_MemoryStream())


def test_serial_sps_writes_nal_unit():
    mgr = ParameterSetMgr()
    mgr.init_config(_config())
    sps = mgr.construct_sps()
    stream = _MemoryStream()
    mgr.serial_sps(stream)

    out = stream.value
    # start code, then forbidden bit 0, nal_ref_idc 3, nal_unit_type 7
    assert out[:5] == b"\x00\x00\x00\x01\x67"
    assert out[5] == 66
    assert out[5:] == sodb_to_ebsp(sps.encapsulate()).data
    assert out[-1] != 0