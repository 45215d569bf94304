"""Adapters for IO and optional third-party integrations."""

from .file_system import FileSystemAdapter, default_file_system
from .magic_adapter import MagicAdapter

__all__ = ["FileSystemAdapter", "default_file_system", "MagicAdapter"]
