#!/usr/bin/env python3
"""
Exceptions raised by magicsniff
"""


class MagicSniffError(Exception):
    """Base class for all magicsniff errors"""


class InvalidBufferError(MagicSniffError, TypeError):
    """Raised when detection is asked to inspect something that is not a byte buffer"""


class RuleTableError(MagicSniffError, ValueError):
    """Raised when a pattern or rule is constructed with invalid values"""
