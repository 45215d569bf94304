"""Application services for magicsniff."""

from .detection_service import DetectionService, detect_file

__all__ = ["DetectionService", "detect_file"]
