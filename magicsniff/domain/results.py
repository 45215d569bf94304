"""Typed result model for file-level detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .file_types import FileType


@dataclass
class DetectionResult:
    """Outcome of detecting one file."""

    path: str
    file_type: FileType | None = None
    size: int = 0
    matches: list[FileType] = field(default_factory=list)
    libmagic: str | None = None
    error: str | None = None

    @property
    def extension(self) -> str | None:
        return self.file_type.extension() if self.file_type else None

    @property
    def description(self) -> str:
        return self.file_type.description() if self.file_type else "Unknown"

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "file_type": self.file_type.name if self.file_type else None,
            "extension": self.extension,
            "description": self.description,
            "category": self.file_type.category() if self.file_type else None,
            "size": self.size,
            "matches": [match.name for match in self.matches],
            "libmagic": self.libmagic,
            "error": self.error,
        }
