"""Logging utilities for appdocs commands.

Everything below the ``appdocs`` logger goes to the error stream. Status lines
for users (what is scanned, counts found, output written) are printed to
stdout by the pipeline and never pass through here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

_LOGGER_NAME = "appdocs"
CONSOLE_FORMAT = "[appdocs] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``appdocs.<name>``, or the ``appdocs`` root logger."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Install the console handler and, when ``log_file`` is given, a timestamped file sink.

    ``verbose`` lowers both handlers to DEBUG, which adds per-file record
    counts and run state transitions. Calling this again replaces the handlers
    installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [_handler(logging.StreamHandler(stream), level, CONSOLE_FORMAT)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(_handler(logging.FileHandler(log_file, encoding="utf-8"), level, FILE_FORMAT))
    for handler in handlers:
        logger.addHandler(handler)
    return logger


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def log_skipped(logger: logging.Logger, path: str | Path, exc: BaseException) -> None:
    """A source file or directory left out of the run after a recoverable failure.

    The warning names the path and the error; the traceback is only shown with
    ``--verbose``.
    """
    logger.warning("Skipping %s: %s", path, exc)
    logger.debug("Skip reason for %s", path, exc_info=exc)


def log_transition(logger: logging.Logger, kind: str, previous: str, state: str) -> None:
    logger.debug("%s run: %s -> %s", kind, previous, state)


__all__ = [
    "CONSOLE_FORMAT",
    "FILE_FORMAT",
    "configure_logging",
    "get_logger",
    "log_skipped",
    "log_transition",
]
