"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from debugdecoders.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "debugdecoders"
    assert get_logger("pairing").name == "debugdecoders.pairing"


def test_configure_logging_does_not_stack_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"

    configure_logging()
    logger = configure_logging(verbose=True, log_file=log_file)
    get_logger("orchestrator").debug("hello %s", "file")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "hello file" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
