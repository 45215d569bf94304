#!/usr/bin/env python3
"""
Magic byte detection over in-memory buffers
"""

from __future__ import annotations

from collections.abc import Iterable

from ..domain.file_types import FileType
from ..utils.logger import get_logger
from .exceptions import InvalidBufferError
from .patterns import Buffer, Rule
from .rule_table import RULE_TABLE

logger = get_logger(__name__)


def _as_buffer(buffer: Buffer) -> Buffer:
    """Validate caller input, normalizing memoryviews to a flat byte view"""
    if isinstance(buffer, (bytes, bytearray)):
        return buffer

    if isinstance(buffer, memoryview):
        if buffer.format == "B" and buffer.ndim == 1 and buffer.c_contiguous:
            return buffer
        return buffer.tobytes()

    raise InvalidBufferError(
        f"expected bytes, bytearray or memoryview, got {type(buffer).__name__}"
    )


def detect(buffer: Buffer, rules: Iterable[Rule] = RULE_TABLE) -> FileType | None:
    """
    Identify the file type of a buffer.

    Rules are evaluated in order and the first full match wins. Buffers too
    short for a pattern simply fail that pattern.

    Args:
        buffer: Bytes to inspect
        rules: Ordered rules, defaults to the built-in table

    Returns:
        Matching FileType, or None if no rule matches

    Raises:
        InvalidBufferError: If buffer is not a bytes-like object
    """
    data = _as_buffer(buffer)

    for rule in rules:
        if rule.matches(data):
            logger.debug(f"Matched {rule.file_type.name} ({len(data)} bytes)")
            return rule.file_type

    logger.debug(f"No magic signature matched ({len(data)} bytes)")
    return None


def detect_all(buffer: Buffer, rules: Iterable[Rule] = RULE_TABLE) -> list[FileType]:
    """Return every distinct matching file type, in rule order"""
    data = _as_buffer(buffer)

    matches: list[FileType] = []
    for rule in rules:
        if rule.file_type not in matches and rule.matches(data):
            matches.append(rule.file_type)
    return matches
