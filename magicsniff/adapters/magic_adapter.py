"""Adapter for optional python-magic integration."""

from __future__ import annotations

from typing import Any

from ..utils.logger import get_logger

logger = get_logger(__name__)


class MagicAdapter:
    """Thin wrapper around python-magic to keep libmagic details out of callers."""

    def __init__(self) -> None:
        self._magic: Any | None
        try:
            import magic as _magic

            self._magic = _magic
        except ImportError as exc:
            # python-magic imports but libmagic itself may be missing
            logger.debug(f"python-magic unavailable: {exc}")
            self._magic = None

    @property
    def available(self) -> bool:
        return self._magic is not None

    def describe(self, buffer: bytes) -> str | None:
        """Return libmagic's description of a buffer, or None if unavailable"""
        if self._magic is None:
            return None
        try:
            return self._magic.from_buffer(buffer)
        except Exception as exc:
            logger.debug(f"libmagic could not describe buffer: {exc}")
            return None
