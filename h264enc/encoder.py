"""The encoder and the state it works on."""

from __future__ import annotations

from dataclasses import dataclass

from .config import EncoderConfig
from .yuv import YUVFrame


@dataclass
class EncoderContext:
    """Per-run state: frame size, the current input frame and the settings."""

    config: EncoderConfig
    width: int = 0
    height: int = 0
    yuv_frame: YUVFrame | None = None


class Encoder:
    """Encodes raw YUV input according to an :class:`EncoderConfig`."""

    def __init__(self, config: EncoderConfig):
        self.config = config
        self.context: EncoderContext | None = None

    def prepare_context(self) -> EncoderContext:
        """Create a fresh context and load the first input frame into it."""
        config = self.config
        self.context = EncoderContext(
            config=config,
            width=config.width,
            height=config.height,
            yuv_frame=YUVFrame.from_file(config.width, config.height, config.input_file_path),
        )
        return self.context