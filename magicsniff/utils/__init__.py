#!/usr/bin/env python3
"""
magicsniff Utilities
"""

from .logger import get_logger, setup_logger

__all__ = ["get_logger", "setup_logger"]
