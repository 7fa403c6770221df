"""Logging utilities for cemgen commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "cemgen"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Prefix messages with ``[cemgen]``; only non-INFO records show their level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno == logging.INFO:
            return f"[{_LOGGER_NAME}] {message}"
        return f"[{_LOGGER_NAME}] {record.levelname}: {message}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the cemgen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send cemgen records to stderr and, when ``log_file`` is given, to a file.

    ``quiet`` keeps warnings and errors only; ``verbose`` wins over it. Console
    output goes to stderr so ``generate --dry-run`` leaves stdout to the
    declarations.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(ConsoleFormatter("%(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        # The file keeps debug detail even when the console is quiet.
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["ConsoleFormatter", "configure_logging", "get_logger"]
