#!/usr/bin/env python3
"""
magicsniff - Magic number based file type detection

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __version__

__description__ = "Magic number based file type detection"

from .application import DetectionService, detect_file
from .core import (
    RULE_TABLE,
    InvalidBufferError,
    MagicSniffError,
    RuleTableError,
    detect,
    detect_all,
)
from .domain import DetectionResult, FileType

__all__ = [
    "FileType",
    "detect",
    "detect_all",
    "detect_file",
    "DetectionService",
    "DetectionResult",
    "RULE_TABLE",
    "MagicSniffError",
    "InvalidBufferError",
    "RuleTableError",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__description__",
]
