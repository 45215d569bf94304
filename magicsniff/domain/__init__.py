"""Domain types for magicsniff."""

from .file_types import FILE_TYPE_METADATA, FileType
from .results import DetectionResult

__all__ = ["FileType", "FILE_TYPE_METADATA", "DetectionResult"]
