"""Levelled logging to a file, echoing important messages to standard output."""

from __future__ import annotations

import atexit
import os
import threading
import time
from datetime import datetime
from enum import IntEnum

from .fileutil import duplicate_file

MAX_MESSAGE_SIZE = 2048
DEFAULT_LOG_PATH = "log.log"


class LoggerLevel(IntEnum):
    """Severity of a log message; lower values are more severe."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3


def time_description() -> str:
    """Return the local time as ``YYYY_MM_DD_HH_MM_SS.mmm``."""
    now = datetime.now()
    return f"{now:%Y_%m_%d_%H_%M_%S}.{now.microsecond // 1000:03d}"


class Logger:
    """Writes timestamped messages to a log file.

    Messages at INFO level or more severe are also printed to standard
    output. Closing the logger copies the log file to a timestamped backup
    next to it.
    """

    def __init__(self, path: str | os.PathLike = DEFAULT_LOG_PATH, level: LoggerLevel = LoggerLevel.DEBUG):
        self.path = os.fspath(path)
        self._level = LoggerLevel(level)
        self._lock = threading.Lock()
        self._stream = open(self.path, "w", encoding="utf-8")
        self._anchor = time.perf_counter()

    @property
    def level(self) -> LoggerLevel:
        with self._lock:
            return self._level

    def set_level(self, level: LoggerLevel) -> None:
        with self._lock:
            self._level = LoggerLevel(level)

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def log(self, level: LoggerLevel, message: str) -> None:
        """Record ``message`` if ``level`` passes the current threshold."""
        with self._lock:
            if level > self._level or self._stream.closed:
                return
            out_message = f"{time_description()} : {message}\n"
            self._stream.write(out_message)
            self._stream.flush()
            if level <= LoggerLevel.INFO:
                print(out_message, end="")

    def anchor_time(self) -> None:
        """Start measuring elapsed time from now."""
        self._anchor = time.perf_counter()

    def elapsed_seconds(self) -> int:
        """Whole seconds since the last call to :meth:`anchor_time`."""
        return int(time.perf_counter() - self._anchor)

    def close(self) -> str | None:
        """Close the log file and back it up; return the backup path, if any."""
        with self._lock:
            if self._stream.closed:
                return None
            self._stream.flush()
            self._stream.close()
        backup = os.path.join(os.path.dirname(self.path), time_description() + "_log.log")
        try:
            duplicate_file(self.path, backup)
        except OSError:
            return None
        return backup

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


_instance: Logger | None = None
_instance_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the process-wide logger, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Logger()
            atexit.register(_instance.close)
        return _instance


def log(level: LoggerLevel, fmt: str, *args) -> None:
    """Format a printf-style message and send it to the shared logger."""
    message = fmt % args if args else fmt
    get_logger().log(level, message[: MAX_MESSAGE_SIZE - 1])


def log_error(fmt: str, *args) -> None:
    log(LoggerLevel.ERROR, fmt, *args)


def log_warning(fmt: str, *args) -> None:
    log(LoggerLevel.WARNING, fmt, *args)


def log_info(fmt: str, *args) -> None:
    log(LoggerLevel.INFO, fmt, *args)


def log_debug(fmt: str, *args) -> None:
    log(LoggerLevel.DEBUG, fmt, *args)