"""Tests for the package logging setup."""

import logging

from tablegrid.logging_config import setup_logging


def test_repeated_setup_replaces_handlers():
    logger = setup_logging(logging.DEBUG)
    setup_logging("WARNING")
    assert logger is logging.getLogger("tablegrid")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_log_file_receives_package_records(tmp_path):
    log_file = tmp_path / "tablegrid.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    logging.getLogger("tablegrid.layout.grid").debug("built grid")
    for handler in logger.handlers:
        handler.flush()
    assert "DEBUG tablegrid.layout.grid: built grid" in log_file.read_text(encoding="utf-8")
    setup_logging(logging.WARNING)
