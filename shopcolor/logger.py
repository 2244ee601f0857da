"""
Design (logger.py)
- Purpose: Configure the "shopcolor" logger tree: console always, dated log file optionally.
- Inputs: Level name and file toggle (defaults from config).
- Outputs: None.
- Side effects: Attaches handlers to logging.getLogger("shopcolor"); may create LOG_DIR.
- Thread-safety: Call once from the main thread at startup; logging itself is thread-safe.
"""

import logging
from datetime import datetime
from pathlib import Path

from .config import ENABLE_FILE_LOGGING, LOG_DIR, LOG_LEVEL

LOGGER_NAME = "shopcolor"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | None = None, enable_file: bool | None = None, log_dir: Path | None = None) -> logging.Logger:
    """
    Configure the application logger. Safe to call more than once: existing handlers are reused.

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to LOG_LEVEL.
        enable_file: Also write to logs/shopcolor_YYYYMMDD.log. Defaults to ENABLE_FILE_LOGGING.
        log_dir: Directory for the log file. Defaults to LOG_DIR.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or LOG_LEVEL).upper())
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(getattr(h, "_shopcolor_console", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler._shopcolor_console = True  # type: ignore[attr-defined]
        logger.addHandler(console_handler)

    if ENABLE_FILE_LOGGING if enable_file is None else enable_file:
        directory = log_dir or LOG_DIR
        directory.mkdir(parents=True, exist_ok=True)
        log_file = directory / f"shopcolor_{datetime.now().strftime('%Y%m%d')}.log"
        already = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file.resolve()
            for h in logger.handlers
        )
        if not already:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
