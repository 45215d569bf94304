#!/usr/bin/env python3
"""
File-level detection built on the in-memory detector.

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

from collections.abc import Iterable
from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..adapters.magic_adapter import MagicAdapter
from ..config import Config
from ..core.detector import detect_all
from ..domain.results import DetectionResult
from ..utils.logger import get_logger

logger = get_logger(__name__)


class DetectionService:
    """Read the bytes detection needs from files and classify them."""

    def __init__(
        self,
        config: Config | None = None,
        file_system: FileSystemAdapter | None = None,
        magic_adapter: MagicAdapter | None = None,
    ) -> None:
        self.config = config or Config()
        self.file_system = file_system or default_file_system
        self.magic_adapter = magic_adapter
        if self.magic_adapter is None and self.config.is_libmagic_enabled():
            self.magic_adapter = MagicAdapter()

    def detect_path(self, path: str | Path) -> DetectionResult:
        result = DetectionResult(path=str(path))
        try:
            result.size = self.file_system.file_size(path)
            data = self.file_system.read_head_and_tail(
                path, self.config.get_head_size(), self.config.get_tail_size()
            )
        except OSError as exc:
            logger.error(f"Could not read {path}: {exc}")
            result.error = exc.strerror or str(exc)
            return result

        result.matches = detect_all(data)
        result.file_type = result.matches[0] if result.matches else None
        if self.magic_adapter is not None:
            result.libmagic = self._describe_with_libmagic(path)

        logger.info(
            f"{path}: {result.file_type.name if result.file_type else 'unknown'}"
        )
        return result

    def _describe_with_libmagic(self, path: str | Path) -> str | None:
        # libmagic looks deeper than the head/tail splice, e.g. JPEG SOF dimensions
        try:
            head = self.file_system.read_bytes(path, size=self.config.get_libmagic_head_size())
        except OSError as exc:
            logger.warning(f"Could not read {path} for libmagic: {exc}")
            return None
        return self.magic_adapter.describe(head) if self.magic_adapter else None

    def detect_paths(
        self, paths: Iterable[str | Path], recursive: bool | None = None
    ) -> list[DetectionResult]:
        """Detect every file named, expanding directories"""
        if recursive is None:
            recursive = bool(self.config.get("detection", "recursive", False))

        results: list[DetectionResult] = []
        for path in paths:
            candidate = Path(path)
            if candidate.is_dir():
                try:
                    files = self.file_system.iter_files(candidate, recursive=recursive)
                except OSError as exc:
                    logger.error(f"Could not list {candidate}: {exc}")
                    results.append(DetectionResult(path=str(candidate), error=str(exc)))
                    continue
                results.extend(self.detect_path(file_path) for file_path in files)
            else:
                results.append(self.detect_path(candidate))
        return results


def detect_file(path: str | Path, config: Config | None = None) -> DetectionResult:
    """Detect the file type of a single file on disk"""
    return DetectionService(config).detect_path(path)
