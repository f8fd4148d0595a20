"""Tests for logging configuration."""

from __future__ import annotations

import io
import logging

import pytest

from adjlist.logs import (
    ColorFormatter,
    ExitStreamHandler,
    fatal,
    setup_logging,
    verbosity_level,
)


def make_record(level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord("adjlist", level, __file__, 1, msg, None, None)


class TestColorFormatter:
    def test_plain(self) -> None:
        formatter = ColorFormatter(use_color=False)
        assert formatter.format(make_record(logging.ERROR, "boom")) == "ERROR: boom"

    def test_color(self) -> None:
        formatter = ColorFormatter(use_color=True)
        text = formatter.format(make_record(logging.WARNING, "careful"))
        assert text == "\x1b[33;1mWARNING:\x1b[0m careful"


class TestExitStreamHandler:
    def test_exits_at_exit_level(self) -> None:
        handler = ExitStreamHandler(io.StringIO(), exit_level=logging.ERROR)
        with pytest.raises(SystemExit):
            handler.emit(make_record(logging.ERROR, "boom"))

    def test_below_exit_level(self) -> None:
        stream = io.StringIO()
        handler = ExitStreamHandler(stream, exit_level=logging.ERROR)
        handler.emit(make_record(logging.WARNING, "careful"))
        assert "careful" in stream.getvalue()


class TestSetupLogging:
    def test_verbosity_level(self) -> None:
        assert verbosity_level(None) == logging.WARNING
        assert verbosity_level(0) == logging.WARNING
        assert verbosity_level(1) == logging.INFO
        assert verbosity_level(3) == logging.DEBUG

    def test_replaces_previous_handler(self) -> None:
        stream = io.StringIO()
        setup_logging(stream, logging.INFO, logging.FATAL)
        setup_logging(stream, logging.DEBUG, logging.FATAL)
        root = logging.getLogger()
        handlers = [h for h in root.handlers if isinstance(h, ExitStreamHandler)]
        assert len(handlers) == 1
        assert root.level == logging.DEBUG

    def test_logs_to_stream(self) -> None:
        stream = io.StringIO()
        setup_logging(stream, logging.INFO, logging.FATAL)
        logging.info("loaded graph")
        assert "INFO: loaded graph" in stream.getvalue()

    def test_fatal_exits(self) -> None:
        setup_logging(io.StringIO(), logging.WARNING, logging.FATAL)
        with pytest.raises(SystemExit):
            fatal("cannot continue")
