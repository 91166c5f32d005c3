"""Logger hierarchy shared by the readmegen CLI, pipeline and service."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "readmegen"
CONSOLE_FORMAT = "[readmegen] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``readmegen.<name>``, or the root ``readmegen`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _formatted(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Send readmegen records to stderr and, when ``log_file`` is given, to that file.

    Calling this again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_formatted(logging.StreamHandler(), level, CONSOLE_FORMAT))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(
            _formatted(logging.FileHandler(log_file, encoding="utf-8"), level, FILE_FORMAT)
        )
    return logger


__all__ = ["configure_logging", "get_logger"]
