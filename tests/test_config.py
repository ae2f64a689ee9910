import pytest

from h264enc.config import EncoderConfig, parse_config_map, read_encoder_config

FULL_MAP = {
    "input_file_path": "in.yuv",
    "output_file_path": "out.264",
    "width": "176",
    "height": "144",
    "frames_to_encode": "10",
    "profile_idc": "66",
    "level_idc": "30",
    "ref_frame_number": "1",
}


def test_parse_config_map_reads_every_field():
    config = parse_config_map(FULL_MAP)
    assert config == EncoderConfig(
        input_file_path="in.yuv",
        output_file_path="out.264",
        width=176,
        height=144,
        frames_to_encode=10,
        profile_idc=66,
        level_idc=30,
        ref_frame_number=1,
    )


@pytest.mark.parametrize("missing", sorted(FULL_MAP))
def test_parse_config_map_missing_entry(missing):
    partial = {k: v for k, v in FULL_MAP.items() if k != missing}
    with pytest.raises(KeyError, match=missing):
        parse_config_map(partial)


def test_parse_config_map_uses_leading_integer():
    values = dict(FULL_MAP, width="176px")
    assert parse_config_map(values).width == 176


def test_parse_config_map_rejects_non_numeric():
    values = dict(FULL_MAP, height="tall")
    with pytest.raises(ValueError, match="height"):
        parse_config_map(values)


def test_read_encoder_config_from_file(tmp_path):
    lines = ["// encoder settings"]
    lines += [f"{name} = {value}" for name, value in FULL_MAP.items()]
    path = tmp_path / "config.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert read_encoder_config(path) == parse_config_map(FULL_MAP)


def test_read_encoder_config_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_encoder_config(tmp_path / "absent.txt")


def test_read_encoder_config_incomplete_file(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("width = 16\nheight = 16\n", encoding="utf-8")
    with pytest.raises(KeyError):
        read_encoder_config(path)