"""Tests for the centralized logging module."""

from __future__ import annotations

import logging

import pytest

from steambot._log import _Formatter, get_logger, setup_logging


@pytest.fixture()
def _caplog_steambot(caplog):
    """Attach caplog handler to the ``steambot`` logger so records are captured
    even though ``propagate=False``."""
    root = logging.getLogger("steambot")
    previous = caplog.handler.formatter
    caplog.handler.setFormatter(_Formatter())
    root.addHandler(caplog.handler)
    yield
    root.removeHandler(caplog.handler)
    caplog.handler.setFormatter(previous)


class TestGetLogger:
    def test_returns_logger(self):
        log = get_logger("test.tag")
        assert isinstance(log, logging.Logger)
        assert log.name == "steambot.test.tag"

    def test_child_of_steambot(self):
        log = get_logger("child")
        assert log.parent is not None
        assert log.parent.name == "steambot"


class TestSetupLogging:
    def test_idempotent(self):
        root = logging.getLogger("steambot")
        setup_logging()
        count_before = len(root.handlers)
        setup_logging()
        assert len(root.handlers) == count_before

    def test_propagate_false(self):
        setup_logging()
        assert logging.getLogger("steambot").propagate is False

    def test_verbose_after_setup_lowers_level(self):
        root = logging.getLogger("steambot")
        previous = root.level
        setup_logging()
        setup_logging(verbose=True)
        try:
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)


class TestLogOutput:
    @pytest.mark.usefixtures("_caplog_steambot")
    def test_warning_captured(self, caplog):
        log = get_logger("testtag")
        with caplog.at_level("WARNING", logger="steambot.testtag"):
            log.warning("hello world")
        assert "[testtag] hello world" in caplog.text

    @pytest.mark.usefixtures("_caplog_steambot")
    def test_tag_strips_prefix(self, caplog):
        log = get_logger("client")
        with caplog.at_level("WARNING", logger="steambot.client"):
            log.warning("test message")
        assert "[client] test message" in caplog.text
        assert "[steambot.client]" not in caplog.text


class TestFormatter:
    def _record(self, name: str = "steambot.client") -> logging.LogRecord:
        return logging.LogRecord(name, logging.WARNING, __file__, 1, "sent %d", (3,), None)

    def test_prefix_applied_once_across_handlers(self):
        formatter = _Formatter()
        record = self._record()
        assert formatter.format(record) == "[client] sent 3"
        assert formatter.format(record) == "[client] sent 3"

    def test_record_left_untouched(self):
        record = self._record()
        _Formatter().format(record)
        assert record.msg == "sent %d"
        assert record.getMessage() == "sent 3"
