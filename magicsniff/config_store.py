#!/usr/bin/env python3
"""
Configuration persistence utilities for magicsniff.

This module encapsulates file IO for loading and saving configuration data,
keeping the Config model focused on defaults and accessors.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .utils.logger import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """Load and save configuration dictionaries to disk."""

    @staticmethod
    def load(path: str) -> dict[str, Any] | None:
        """Load configuration from a JSON file path."""
        try:
            with open(path) as handle:
                data = json.load(handle)
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring config {path}: top level must be an object")
        except (OSError, ValueError) as exc:
            logger.warning(f"Could not load config from {path}: {exc}")
        return None

    @staticmethod
    def save(path: str, payload: dict[str, Any]) -> bool:
        """Save configuration to a JSON file path."""
        try:
            config_dir = Path(path).parent
            config_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as handle:
                json.dump(payload, handle, indent=2)
            return True
        except OSError as exc:
            logger.warning(f"Could not save config to {path}: {exc}")
        return False
