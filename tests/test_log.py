import re
from datetime import datetime, timedelta

import pytest

from h264enc import log as logmod
from h264enc.log import (
    Logger,
    LoggerLevel,
    get_logger,
    log,
    log_debug,
    log_error,
    log_info,
    log_warning,
    time_description,
)

TIME_PATTERN = r"\d{4}_\d{2}_\d{2}_\d{2}_\d{2}_\d{2}\.\d{3}"


@pytest.fixture
def logger(tmp_path):
    instance = Logger(tmp_path / "test.log")
    yield instance
    instance.close()


@pytest.fixture
def shared(logger, monkeypatch):
    monkeypatch.setattr(logmod, "_instance", logger)
    return logger


def read(logger):
    with open(logger.path, encoding="utf-8") as handle:
        return handle.read().splitlines()


@pytest.mark.parametrize(
    "threshold, expected",
    [
        (LoggerLevel.ERROR, ["error"]),
        (LoggerLevel.WARNING, ["error", "warning"]),
        (LoggerLevel.INFO, ["error", "warning", "info"]),
        (LoggerLevel.DEBUG, ["error", "warning", "info", "debug"]),
    ],
)
def test_levels_are_ordered_by_severity(logger, threshold, expected):
    logger.set_level(threshold)
    logger.log(LoggerLevel.ERROR, "error")
    logger.log(LoggerLevel.WARNING, "warning")
    logger.log(LoggerLevel.INFO, "info")
    logger.log(LoggerLevel.DEBUG, "debug")
    assert [line.split(" : ", 1)[1] for line in read(logger)] == expected


def test_time_description_format():
    before = datetime.now()
    value = time_description()
    assert len(value) == 23
    assert value[19] == "."
    assert value[20:].isdigit()
    parsed = datetime.strptime(value[:19], "%Y_%m_%d_%H_%M_%S")
    assert abs(parsed - before) < timedelta(seconds=5)


def test_log_line_format(logger):
    logger.log(LoggerLevel.DEBUG, "hello")
    lines = read(logger)
    assert len(lines) == 1
    assert re.fullmatch(TIME_PATTERN + " : hello", lines[0])


def test_default_level_is_debug(logger):
    assert logger.level is LoggerLevel.DEBUG


def test_level_filter(logger):
    logger.set_level(LoggerLevel.WARNING)
    logger.log(LoggerLevel.INFO, "hidden")
    logger.log(LoggerLevel.DEBUG, "hidden too")
    logger.log(LoggerLevel.ERROR, "shown")
    logger.log(LoggerLevel.WARNING, "also shown")
    lines = read(logger)
    assert [line.split(" : ", 1)[1] for line in lines] == ["shown", "also shown"]
    assert logger.level is LoggerLevel.WARNING


def test_info_and_above_printed_debug_not(logger, capsys):
    logger.log(LoggerLevel.INFO, "to console")
    logger.log(LoggerLevel.DEBUG, "file only")
    out = capsys.readouterr().out
    assert "to console" in out
    assert "file only" not in out
    assert len(read(logger)) == 2


def test_close_creates_backup_with_same_content(logger, tmp_path):
    logger.log(LoggerLevel.ERROR, "keep me")
    original = read(logger)
    backup = logger.close()
    assert backup.endswith("_log.log")
    with open(backup, encoding="utf-8") as handle:
        assert handle.read().splitlines() == original
    assert logger.closed


def test_close_twice_returns_none(logger):
    logger.close()
    assert logger.close() is None


def test_log_after_close_is_ignored(logger):
    logger.log(LoggerLevel.ERROR, "first")
    logger.close()
    logger.log(LoggerLevel.ERROR, "second")
    assert len(read(logger)) == 1


def test_elapsed_seconds_after_anchor(logger):
    logger.anchor_time()
    assert logger.elapsed_seconds() == 0


def test_context_manager_closes(tmp_path):
    with Logger(tmp_path / "ctx.log") as instance:
        instance.log(LoggerLevel.INFO, "inside")
    assert instance.closed


def test_get_logger_returns_shared_instance(shared):
    assert get_logger() is shared
    assert get_logger() is get_logger()


def test_log_formats_arguments(shared):
    log_warning("%s=%d", "width", 16)
    assert read(shared)[0].endswith(" : width=16")


def test_log_without_arguments_keeps_percent(shared):
    log(LoggerLevel.ERROR, "100%")
    assert read(shared)[0].endswith(" : 100%")


def test_helpers_use_their_levels(shared):
    shared.set_level(LoggerLevel.INFO)
    log_error("e")
    log_warning("w")
    log_info("i")
    log_debug("d")
    messages = [line.split(" : ", 1)[1] for line in read(shared)]
    assert messages == ["e", "w", "i"]


def test_long_message_is_truncated(shared):
    log_info("x" * 5000)
    message = read(shared)[0].split(" : ", 1)[1]
    assert len(message) == logmod.MAX_MESSAGE_SIZE - 1