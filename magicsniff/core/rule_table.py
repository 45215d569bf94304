#!/usr/bin/env python3
"""Ordered magic byte rules for file type detection."""

from __future__ import annotations

from collections.abc import Iterable

from ..domain.file_types import FileType
from .patterns import Rule, ends_with, starts_with

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
PNG_IEND_CHUNK = b"\x00\x00\x00\x00IEND\xae\x42\x60\x82"
TGA_FOOTER = b"TRUEVISION-XFILE.\x00"
TAR_MAGIC_OFFSET = 0x101

# Earlier entries win when several rules match the same buffer.
RULE_TABLE: tuple[Rule, ...] = (
    # TGA has no leading magic, only the v2 footer
    Rule(FileType.TGA, end=ends_with(TGA_FOOTER)),
    Rule(FileType.JPEG, start=starts_with(b"\xff\xd8")),
    Rule(FileType.PNG, start=starts_with(PNG_SIGNATURE), end=ends_with(PNG_IEND_CHUNK)),
    Rule(FileType.BMP, start=starts_with(b"BM")),
    Rule(FileType.GIF, start=starts_with(b"GIF87a")),
    Rule(FileType.GIF, start=starts_with(b"GIF89a")),
    Rule(FileType.TIFF, start=starts_with(b"II*\x00")),  # little endian
    Rule(FileType.TIFF, start=starts_with(b"MM\x00*")),  # big endian
    Rule(FileType.BZIP2, start=starts_with(b"BZh")),
    Rule(FileType.GZIP, start=starts_with(b"\x1f\x8b")),
    Rule(FileType.ZIP, start=starts_with(b"PK\x03\x04")),
    Rule(FileType.ZIP, start=starts_with(b"PK\x05\x06")),  # empty archive
    Rule(FileType.ZIP, start=starts_with(b"PKLITE", offset=0x1E)),
    Rule(FileType.TAR, start=starts_with(b"ustar  \x00", offset=TAR_MAGIC_OFFSET)),  # GNU
    Rule(FileType.TAR, start=starts_with(b"ustar\x0000", offset=TAR_MAGIC_OFFSET)),  # POSIX
    Rule(FileType.PDF, start=starts_with(b"%PDF-")),
)


def head_reach(rules: Iterable[Rule] = RULE_TABLE) -> int:
    """Bytes from the start of a file needed to evaluate every start pattern"""
    return max((rule.start.reach for rule in rules), default=0)


def tail_reach(rules: Iterable[Rule] = RULE_TABLE) -> int:
    """Bytes from the end of a file needed to evaluate every end pattern"""
    return max((rule.end.reach for rule in rules), default=0)


def rules_for(file_type: FileType, rules: Iterable[Rule] = RULE_TABLE) -> list[Rule]:
    return [rule for rule in rules if rule.file_type is file_type]

