"""Command that writes the sequence parameter set for a configuration."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .config import read_encoder_config
from .log import log_error, log_info
from .parameter_sets import ParameterSetMgr
from .streams import create_file_ostream

DEFAULT_CONFIG = "config.txt"
DEFAULT_OUTPUT = "test.264"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="h264enc",
        description="Write an H.264 sequence parameter set built from an encoder configuration.",
    )
    parser.add_argument("-c", "--config", default=DEFAULT_CONFIG, help="configuration file")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="output stream file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _build_parser().parse_args(argv)
    log_info("codec begin.")
    try:
        config = read_encoder_config(args.config)
        mgr = ParameterSetMgr()
        mgr.init_config(config)
        mgr.construct_sps()
        with create_file_ostream(args.output) as out_stream:
            mgr.serial_sps(out_stream)
    except (OSError, KeyError, ValueError, RuntimeError) as error:
        log_error("codec failed : %s.", error)
        return 1
    log_info("codec end.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())