"""Logging setup for applications embedding the engine.

The library itself only emits records through module loggers; handlers are
attached here, never on import.
"""

from __future__ import annotations

import logging
import sys

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    file_path: str | None = None,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Configure the root logger with a console handler and optional file handler.

    Existing root handlers are removed first so repeated calls do not
    duplicate output.
    """
    logger = logging.getLogger()
    logger.setLevel(min(level, file_level) if file_path else level)

    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path, mode="w", encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
