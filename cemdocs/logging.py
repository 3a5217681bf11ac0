"""Logging setup for cemdocs runs.

Progress goes to the ``cemdocs`` logger hierarchy. Console output is written
to stderr so that stdout only carries the command summary. A run-ending
error is reported once through :func:`report_fatal`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

_LOGGER_NAME = "cemdocs"

CONSOLE_FORMAT = "[cemdocs] %(levelname)s %(message)s"
VERBOSE_CONSOLE_FORMAT = "[cemdocs] %(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the cemdocs hierarchy, e.g. ``cemdocs.writer``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Route cemdocs records to stderr (or ``stream``) and an optional log file.

    Verbose runs log at DEBUG and name the emitting stage. A log file that
    cannot be opened is reported on the console and the run continues.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setFormatter(logging.Formatter(VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            logger.warning("Cannot open log file %s (%s); logging to the console only", log_file, exc)
        else:
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
            logger.addHandler(file_handler)

    return logger


def report_fatal(exc: BaseException, *, verbose: bool = False) -> None:
    """Log the error that ends a run; the traceback is included when verbose."""
    get_logger("cli").error(
        "%s: %s", type(exc).__name__, exc, exc_info=exc if verbose else None
    )


__all__ = ["configure_logging", "get_logger", "report_fatal"]
