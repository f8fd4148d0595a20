"""Logging setup for the adjlist commands."""

import logging
import sys
from logging import Formatter, LogRecord, StreamHandler
from typing import Dict, NoReturn, Optional, TextIO

# ANSI color codes for level names.
LEVEL_COLORS = {
    logging.FATAL: 31,
    logging.ERROR: 31,
    logging.WARNING: 33,
    logging.INFO: 32,
    logging.DEBUG: 35,
}


class ColorFormatter(Formatter):

    """Formats records as "LEVEL: message", coloring LEVEL on terminals."""

    def __init__(self, use_color: bool):  # pylint: disable=super-init-not-called
        self.plain = Formatter("%(levelname)s: %(message)s")
        self.by_level: Dict[int, Formatter] = {}
        if use_color:
            self.by_level = {
                level: Formatter(f"\x1b[{code};1m%(levelname)s:\x1b[0m %(message)s")
                for level, code in LEVEL_COLORS.items()
            }

    def format(self, record: LogRecord) -> str:
        return self.by_level.get(record.levelno, self.plain).format(record)


class ExitStreamHandler(StreamHandler):

    """Stream handler that ends the process once a severe record is written.

    Records at exit_level or above cause sys.exit(1) after being emitted.
    """

    def __init__(
        self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL
    ):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def verbosity_level(verbose: Optional[int]) -> int:
    """Map the number of -v flags to a log level."""
    if not verbose:
        return logging.WARNING
    return logging.INFO if verbose == 1 else logging.DEBUG


def setup_logging(stream: TextIO, log_level: int, exit_level: int):
    """Route root logger output to stream.

    The shell passes exit_level=FATAL so a bad command does not end the
    session; one-shot commands pass ERROR. Repeated calls swap out the
    handler from the previous call instead of stacking another one.
    """
    assert log_level <= exit_level <= logging.FATAL
    root = logging.getLogger()
    root.setLevel(log_level)
    for old in [h for h in root.handlers if isinstance(h, ExitStreamHandler)]:
        root.removeHandler(old)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))
    root.addHandler(handler)
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log at FATAL and exit with status 1.

    The handler from setup_logging normally exits first; the explicit exit
    covers the case where logging was never set up.
    """
    logging.fatal(msg, *args, **kwargs)
    sys.exit(1)
