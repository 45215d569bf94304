#!/usr/bin/env python3
"""
Logging utilities for magicsniff
"""

import logging
import sys
from pathlib import Path

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SHORT_FORMAT = "%(levelname)s - %(message)s"


class CurrentStderrHandler(logging.StreamHandler):
    """Console handler bound to whatever sys.stderr is at emit time"""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def _log_file_path() -> Path:
    return Path.home() / ".magicsniff" / "logs" / "magicsniff.log"


def setup_logger(
    name: str = "magicsniff", level: int = logging.INFO, log_to_file: bool = True
) -> logging.Logger:
    """Configure the named logger once; later calls only adjust the level"""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    console_handler = CurrentStderrHandler()
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if not log_to_file:
        console_handler.setFormatter(logging.Formatter(SHORT_FORMAT))
        return logger

    try:
        log_path = _log_file_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
    except OSError:
        # Read-only home: console only
        console_handler.setFormatter(logging.Formatter(SHORT_FORMAT))
        return logger

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
    console_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
    logger.addHandler(file_handler)
    return logger


def get_logger(name: str = "magicsniff") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
