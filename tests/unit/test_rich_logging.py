"""Tests for console logging setup."""

import io
import logging

import pytest

from kill_tree.utils.rich_logging import KillTreeLogFormatter, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("kill_tree")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(saved[0])
    for handler in saved[1]:
        logger.addHandler(handler)
    logger.propagate = saved[2]


def _record(msg, level=logging.INFO, **extra):
    record = logging.LogRecord("kill_tree.api", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatter:
    def test_plain_format(self):
        line = KillTreeLogFormatter(use_colors=False).format(_record("hello"))

        assert "INFO" in line
        assert "[kill_tree.api]" in line
        assert line.endswith("hello")
        assert "\033[" not in line

    def test_pid_context(self):
        line = KillTreeLogFormatter(use_colors=False).format(_record("killed", pid=42))

        assert "[pid 42] killed" in line

    def test_colors(self):
        line = KillTreeLogFormatter(use_colors=True).format(_record("bad", level=logging.ERROR))

        assert "\033[31m" in line


class TestSetupLogging:
    def test_writes_to_stream_at_level(self, restore_logger):
        stream = io.StringIO()

        setup_logging("INFO", stream=stream)
        logging.getLogger("kill_tree.core.tree").debug("hidden")
        logging.getLogger("kill_tree.core.tree").info("shown")

        output = stream.getvalue()
        assert "shown" in output
        assert "hidden" not in output
        assert "\033[" not in output

    def test_repeated_setup_does_not_duplicate(self, restore_logger):
        stream = io.StringIO()

        setup_logging("INFO", stream=stream)
        setup_logging("INFO", stream=stream)
        logging.getLogger("kill_tree").info("once")

        assert stream.getvalue().count("once") == 1
