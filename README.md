# h264enc

Building blocks for writing an H.264 (AVC) elementary stream, with no
dependencies beyond the standard library:

- `h264enc.bytesdata` – `BytesData`, a byte buffer that can also be filled
  one bit at a time, most significant bit first
- `h264enc.coding` – syntax element writers `u_1`, `u_v`, `ue_v` (unsigned
  Exp-Golomb), `se_v` (signed Exp-Golomb), and `sodb_to_ebsp`, which appends
  the stop bit and padding and inserts emulation prevention bytes
- `h264enc.nalu` – `NaluType`, `NaluPriority` and `Nalu`, which writes an
  Annex B start code (`00 00 00 01`), the one-byte header and the payload
- `h264enc.sps` – `SPSData` and `SPS`, the sequence parameter set fields and
  their bitstream form
- `h264enc.streams` – `OStream`, `FileOStream` and `create_file_ostream`
- `h264enc.color` and `h264enc.yuv` – full-range BT.709 RGB to YUV
  conversion, 4:4:4 and 4:2:0 planes, and raw planar `.yuv` file reading
  and writing through `YUVFrame`
- `h264enc.configutil` and `h264enc.config` – a `name = value` file reader
  and `EncoderConfig`
- `h264enc.parameter_sets` – `ParameterSetMgr`, which builds an SPS from an
  `EncoderConfig` and writes it as an SPS NAL unit
- `h264enc.encoder` – `Encoder`, whose `prepare_context()` loads the first
  input frame into an `EncoderContext`
- `h264enc.log` – a levelled logger writing to `log.log`

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
h264enc [-c CONFIG] [-o OUTPUT]
```

The command reads the encoder configuration (`config.txt` by default),
builds a sequence parameter set from it and writes it as an SPS NAL unit to
the output file (`test.264` by default). Progress messages are printed and
also written to `log.log` in the working directory; when the program exits a
timestamped copy of the log is made next to it. If the configuration cannot
be read or is incomplete, or the output cannot be written, the error is
logged and the exit status is 1.

The configuration holds one `name = value` pair per line; lines starting
with `//` are comments. All of these keys must be present, and the numeric
ones must start with an integer:

```
// source and destination
input_file_path = input.yuv
output_file_path = output.264

// picture size in pixels; at least 16x16, counted in whole 16-pixel macroblocks
width = 352
height = 288

frames_to_encode = 1

// 66 = baseline, 77 = main
profile_idc = 66
level_idc = 30
ref_frame_number = 1
```

The command itself only uses the picture size, `profile_idc`, `level_idc`
and `ref_frame_number`.

## Library use

Exp-Golomb coding into a bit buffer:

```python
from h264enc.bytesdata import BytesData
from h264enc.coding import ue_v

bits = BytesData()
written = ue_v(3, bits)          # 3 is coded as 00100
assert written == 5
assert [bits.bit_at(i) for i in range(5)] == [0, 0, 1, 0, 0]
```

Colour conversion (BT.709, full range):

```python
from h264enc.color import rgb_to_yuv709_full

assert rgb_to_yuv709_full(0, 0, 0) == (0, 128, 128)
```

Writing an SPS from a configuration file to a stream:

```python
from h264enc.config import read_encoder_config
from h264enc.parameter_sets import ParameterSetMgr
from h264enc.streams import create_file_ostream

config = read_encoder_config("config.txt")
manager = ParameterSetMgr()
manager.init_config(config)
manager.construct_sps()

with create_file_ostream("out.264") as stream:
    manager.serial_sps(stream)
```

## What it does not do

This is not a complete encoder. It writes a sequence parameter set and
nothing else: there is no picture parameter set, no slice or IDR coding, and
`frames_to_encode` and `output_file_path` are read but not acted on.
`Encoder.prepare_context()` loads the first frame of the raw `.yuv` input
but does not encode it. There is no decoder, and no reading of image files
such as PNG or JPEG: to convert RGB pixels, build a `ColorData` from
interleaved pixel bytes yourself and pass it to `YUVFrame.from_color_data`.