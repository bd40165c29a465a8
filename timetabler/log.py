"""Logging setup for the timetabler package and its command-line tool."""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "timetabler"
LOG_FORMAT = "[%(levelname)s] %(asctime)s | %(message)s"


def init_logger(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger that every timetabler module logs under.

    Placement detail (each session placed or skipped) is logged at DEBUG,
    run summaries at INFO, and unplaced, fallback and repaired sessions at
    WARNING. Calling this again replaces the previous handlers.

    Args:
        debug: Show placement detail on the console
        log_file: Also write the full DEBUG log to this file, whatever the
                  console level
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT, "%H:%M:%S")

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.DEBUG if debug else logging.INFO)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger
