"""Building blocks for writing H.264 elementary streams: bit coding, NAL units, SPS and YUV frames."""

__version__ = "0.1.0"