#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks.

This module configures console logging for applications (e.g. the client), the
library itself never adds handlers other than a NullHandler.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime as dt

import colorlog

from .version import VERSION

DEFAULT_FMT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

COLOR_FMT = "%(log_color)s" + DEFAULT_FMT

LOG_COLOURS = {
    "DEBUG": "white",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "bold_red",
    "CRITICAL": "bold_red",
}  # default_log_colors


class _Formatter:  # format asctime via datetime, not time
    """Formatter instances convert a LogRecord to text."""

    default_time_format = DEFAULT_DATEFMT

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Return the creation time (asctime) of the LogRecord as formatted text."""
        return dt.fromtimestamp(record.created).strftime(
            datefmt or self.default_time_format
        )


class ColoredFormatter(_Formatter, colorlog.ColoredFormatter):  # type: ignore[misc]
    pass


class Formatter(_Formatter, logging.Formatter):  # type: ignore[misc]
    pass


def set_logging(
    logger: logging.Logger,
    level: int | str = logging.WARNING,
    use_color: bool = True,
) -> None:
    """Create/configure a console handler for a logger (usu. the package's logger).

    May be called several times, any handlers from a previous call are removed.
    """

    logger.setLevel(level)

    for handler in list(logger.handlers):  # to avoid duplicate log lines
        logger.removeHandler(handler)

    console_fmt: ColoredFormatter | Formatter
    if use_color:
        console_fmt = ColoredFormatter(
            fmt=COLOR_FMT,
            datefmt=DEFAULT_DATEFMT,
            reset=True,
            log_colors=LOG_COLOURS,
        )
    else:
        console_fmt = Formatter(fmt=DEFAULT_FMT, datefmt=DEFAULT_DATEFMT)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(console_fmt)
    logger.addHandler(handler)

    logger.debug("qalcosonic %s: logging configured", VERSION)
