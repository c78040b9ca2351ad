from __future__ import annotations

import logging
import sys
from typing import TextIO

"""Labeled logging for the roster_ingest package.

All output of a run is written as ``<LABEL> <message>`` lines, LABEL being one
of INFO|WARN|ERROR|SUMMARY (DEBUG once debug output is enabled). Pipeline
modules log through ``logging.getLogger(__name__)``; those child loggers
propagate into the ``roster_ingest`` logger set up here, which in turn does
not propagate to the root logger.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "enable_debug",
    "get_logger",
    "log_summary",
    "reset_logging",
    "setup_logging",
]

LOGGER_NAME = "roster_ingest"

# between INFO (20) and WARNING (30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """``<LABEL> <message>`` with WARNING shortened to WARN."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Configure the package logger once and return it.

    Args:
        level: Threshold for the logger and its handler
        stream: Output stream; stdout (resolved at call time) when omitted,
            so log lines and the progress bar share one stream

    Returns:
        The ``roster_ingest`` logger. Later calls return the same instance
        until :func:`reset_logging` is called.
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # handlers left over from an earlier setup would print every line twice
    for old in logger.handlers[:]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return logger


def enable_debug(logger: logging.Logger | None = None) -> None:
    """Lower the logger and all of its handlers to DEBUG."""
    target = logger if logger is not None else get_logger()
    target.setLevel(logging.DEBUG)
    for handler in target.handlers:
        handler.setLevel(logging.DEBUG)


def get_logger() -> logging.Logger:
    """Return the package logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    """Emit ``message`` at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Forget the configured logger so the next setup starts fresh (tests)."""
    global _logger
    _logger = None
