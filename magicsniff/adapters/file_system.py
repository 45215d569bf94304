#!/usr/bin/env python3
"""Filesystem adapter for controlled IO access."""

from __future__ import annotations

from pathlib import Path


class FileSystemAdapter:
    """Provide a minimal filesystem access abstraction."""

    def read_bytes(self, path: str | Path, size: int | None = None, offset: int = 0) -> bytes:
        file_path = Path(path)
        with file_path.open("rb") as handle:
            if offset:
                handle.seek(offset)
            return handle.read() if size is None else handle.read(size)

    def file_size(self, path: str | Path) -> int:
        return Path(path).stat().st_size

    def read_head_and_tail(self, path: str | Path, head_size: int, tail_size: int) -> bytes:
        """
        Read the leading and trailing bytes of a file as one buffer.

        Small files are returned whole. Otherwise the first head_size bytes are
        concatenated with the last tail_size bytes, so start-anchored patterns
        within head_size and end-anchored patterns within tail_size see the
        same bytes they would in the full file.
        """
        file_path = Path(path)
        with file_path.open("rb") as handle:
            size = handle.seek(0, 2)
            handle.seek(0)
            if size <= head_size + tail_size:
                return handle.read()

            head = handle.read(head_size)
            handle.seek(size - tail_size)
            tail = handle.read(tail_size)
        return head + tail

    def iter_files(self, path: str | Path, recursive: bool = False) -> list[Path]:
        """Regular files under a directory, sorted for stable output"""
        root = Path(path)
        candidates = root.rglob("*") if recursive else root.iterdir()
        return sorted(candidate for candidate in candidates if candidate.is_file())


default_file_system = FileSystemAdapter()
