"""Root logger configuration for the command line and GUI front-ends."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from reaparser.utils.config import LOG_FORMAT


def setup_logging(log_file: Path | None = None, level: str = "INFO") -> logging.Logger:
    """
    Configure logging to stderr and, optionally, a file.

    Args:
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers = []

    # stdout is reserved for JSON output, so the console goes to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        root_logger.addHandler(file_handler)

    return root_logger
