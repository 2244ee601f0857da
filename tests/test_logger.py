"""
Tests for logging setup
"""
import logging

import pytest

from shopcolor.logger import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


def test_console_handler_installed_once():
    logger = setup_logging("debug", enable_file=False)
    setup_logging("debug", enable_file=False)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_file_logging(tmp_path):
    logger = setup_logging("INFO", enable_file=True, log_dir=tmp_path)
    setup_logging("INFO", enable_file=True, log_dir=tmp_path)
    logging.getLogger(f"{LOGGER_NAME}.controller").info("Fetched 3 shops")
    for handler in logger.handlers:
        handler.flush()

    files = list(tmp_path.glob("shopcolor_*.log"))
    assert len(files) == 1
    assert "Fetched 3 shops" in files[0].read_text(encoding="utf-8")
    assert sum(isinstance(h, logging.FileHandler) for h in logger.handlers) == 1
