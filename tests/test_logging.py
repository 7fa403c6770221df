"""Tests for cemgen.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from cemgen.logging import ConsoleFormatter, configure_logging, get_logger


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("cemgen.test", level, __file__, 1, message, None, None)


def test_console_formatter_hides_level_for_info() -> None:
    formatter = ConsoleFormatter("%(message)s")

    assert formatter.format(_record(logging.INFO, 'Generated "out.d.ts".')) == '[cemgen] Generated "out.d.ts".'
    assert formatter.format(_record(logging.WARNING, "manifest has no modules")) == (
        "[cemgen] WARNING: manifest has no modules"
    )


def test_get_logger_nests_under_cemgen() -> None:
    assert get_logger("generator.solid").name == "cemgen.generator.solid"
    assert get_logger().name == "cemgen"


def test_configure_logging_levels() -> None:
    assert configure_logging().level == logging.INFO
    assert configure_logging(quiet=True).level == logging.WARNING
    assert configure_logging(verbose=True, quiet=True).level == logging.DEBUG


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    logger = configure_logging(log_file=tmp_path / "cemgen.log")
    assert len(logger.handlers) == 2

    logger = configure_logging()
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, ConsoleFormatter)
