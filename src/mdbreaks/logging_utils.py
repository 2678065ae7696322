"""Logging setup for the mdbreaks command line.

Handlers are attached to the ``mdbreaks`` package logger rather than the root
logger, so a host application that imports mdbreaks keeps control of its own
logging configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from mdbreaks.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    PACKAGE_LOGGER_NAME,
    TRACE_DATE_FORMAT,
    TRACE_LOG_FORMAT,
)


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name (any case) or number into a numeric level.

    Unknown names resolve to the CLI default level.
    """
    if isinstance(log_level, int):
        return log_level
    resolved = logging.getLevelName(str(log_level).upper())
    if isinstance(resolved, int):
        return resolved
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send ``mdbreaks`` log records to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"DEBUG"``)
    log_file : str, optional
        Path of a UTF-8 file that receives the same records
    trace_mode : bool, default False
        Include time, logger name and line number in each record

    Returns
    -------
    logging.Logger
        The configured ``mdbreaks`` logger

    Notes
    -----
    Calling this again replaces the handlers installed by the previous call.
    The package logger stops propagating to the root logger.

    """
    level = resolve_log_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            package_logger.warning(f"Could not open log file {log_file}: {e}")
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug(f"Logging to file: {log_file}")

    return package_logger
