"""Logging setup for the terminal game. Modules log through `logging.getLogger(__name__)`; this configures the `src` root once at startup."""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "src"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the package logger
    ----

    * Console output goes to stderr, so it never interleaves with the board printed on stdout.
    * An optional log file receives the same records (directory is created if needed).

    Calling this twice replaces the handlers instead of duplicating them.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    formatter = logging.Formatter(format_string)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
