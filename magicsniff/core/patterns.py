#!/usr/bin/env python3
"""
Byte patterns and the rules built from them.

A Pattern is a signature anchored at the start or the end of a buffer. A Rule
pairs one start-anchored and one end-anchored pattern with the FileType they
identify; a null pattern (empty signature) is not checked.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from ..domain.file_types import FileType
from .exceptions import RuleTableError

Buffer = Union[bytes, bytearray, memoryview]


class Anchor(Enum):
    """Where a pattern's offset is counted from"""

    START = "start"
    END = "end"


@dataclass(frozen=True)
class Pattern:
    """
    Immutable byte-matching rule.

    Attributes:
        signature: Bytes that must be present. Empty means "always matches".
        offset: For START, leading bytes to skip. For END, trailing bytes to
            trim before comparing against the tail.
        anchor: Side of the buffer the offset is counted from.
    """

    signature: bytes = b""
    offset: int = 0
    anchor: Anchor = Anchor.START

    def __post_init__(self):
        """Validate pattern values"""
        if not isinstance(self.signature, bytes):
            raise RuleTableError(
                f"signature must be bytes, got {type(self.signature).__name__}"
            )

        if isinstance(self.offset, bool) or not isinstance(self.offset, int):
            raise RuleTableError(f"offset must be an int, got {self.offset!r}")

        if self.offset < 0:
            raise RuleTableError("offset must be non-negative")

        if not isinstance(self.anchor, Anchor):
            raise RuleTableError(f"anchor must be an Anchor, got {self.anchor!r}")

    @property
    def is_null(self) -> bool:
        return not self.signature

    @property
    def reach(self) -> int:
        """Number of bytes from the anchored side needed to evaluate this pattern"""
        if self.is_null:
            return 0
        return self.offset + len(self.signature)

    def matches(self, buffer: Buffer) -> bool:
        """Return True if the signature is found at the anchored position"""
        if self.is_null:
            return True

        length = len(self.signature)
        size = len(buffer)

        if self.anchor is Anchor.START:
            end = self.offset + length
            if end > size:
                return False
            return buffer[self.offset : end] == self.signature

        trimmed = size - self.offset
        if length > trimmed:
            return False
        return buffer[trimmed - length : trimmed] == self.signature

    def describe(self) -> str:
        """Short human readable form, e.g. 'start+0x101: 7573746172202000'"""
        if self.is_null:
            return "-"
        side = "start" if self.anchor is Anchor.START else "end"
        return f"{side}+{self.offset:#x}: {self.signature.hex()}"


NULL_START = Pattern(anchor=Anchor.START)
NULL_END = Pattern(anchor=Anchor.END)


def starts_with(signature: bytes, offset: int = 0) -> Pattern:
    return Pattern(signature, offset, Anchor.START)


def ends_with(signature: bytes, offset: int = 0) -> Pattern:
    return Pattern(signature, offset, Anchor.END)


@dataclass(frozen=True)
class Rule:
    """A start pattern and an end pattern that together identify one FileType"""

    file_type: FileType
    start: Pattern = field(default=NULL_START)
    end: Pattern = field(default=NULL_END)

    def __post_init__(self):
        """Validate rule configuration"""
        if not isinstance(self.file_type, FileType):
            raise RuleTableError(f"file_type must be a FileType, got {self.file_type!r}")

        if not isinstance(self.start, Pattern) or not isinstance(self.end, Pattern):
            raise RuleTableError("start and end must be Pattern instances")

        if self.start.anchor is not Anchor.START:
            raise RuleTableError("start pattern must be anchored at START")

        if self.end.anchor is not Anchor.END:
            raise RuleTableError("end pattern must be anchored at END")

        # Would match every buffer, including the empty one
        if self.start.is_null and self.end.is_null:
            raise RuleTableError(f"rule for {self.file_type.name} has no signature")

    def matches(self, buffer: Buffer) -> bool:
        return self.start.matches(buffer) and self.end.matches(buffer)
