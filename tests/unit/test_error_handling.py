"""Tests for error_handling utilities."""

import logging

from kill_tree.utils.error_handling import log_and_ignore


def test_log_and_ignore_does_not_raise(caplog):
    """log_and_ignore logs at WARNING by default and swallows the error."""
    with caplog.at_level(logging.WARNING, logger="kill_tree"):
        try:
            raise ValueError("bad status line")
        except ValueError as e:
            log_and_ignore(e, "Skipping process entry")

    assert "Skipping process entry: bad status line" in caplog.text


def test_log_and_ignore_custom_logger_and_level(caplog):
    custom = logging.getLogger("kill_tree.platforms.linux")

    with caplog.at_level(logging.DEBUG, logger="kill_tree"):
        log_and_ignore(OSError("gone"), "Skipping", logger_instance=custom, level=logging.DEBUG)

    assert caplog.records[-1].name == "kill_tree.platforms.linux"
    assert caplog.records[-1].levelno == logging.DEBUG
