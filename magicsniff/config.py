#!/usr/bin/env python3
"""
magicsniff Configuration Management
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .config_store import ConfigStore
from .core.rule_table import RULE_TABLE, head_reach, tail_reach
from .utils.logger import get_logger

logger = get_logger(__name__)


class Config:
    """Configuration manager for magicsniff"""

    DEFAULT_CONFIG = {
        # 0 means "as much as the rule table needs"
        "detection": {"head_size": 0, "tail_size": 0, "recursive": False},
        "libmagic": {"enabled": False, "head_size": 1024 * 1024},
        "output": {"json_indent": 2},
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        # Load configuration if exists
        if os.path.exists(self.config_path):
            self.load_config()

    def _get_default_config_path(self) -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".magicsniff" / "config.json")

    def load_config(self):
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if user_config:
            self._merge_config(user_config)

    def save_config(self) -> bool:
        """Save configuration to file"""
        return ConfigStore.save(self.config_path, self.config)

    def _merge_config(self, user_config: Dict[str, Any]):
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section not in self.config:
                self.config[section] = settings
            elif isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                logger.warning(
                    f"Ignoring config section '{section}' in {self.config_path}: expected an object"
                )

    def get(self, section: str, key: Optional[str] = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        settings = self.config.get(section, {})
        if not isinstance(settings, dict):
            return default
        return settings.get(key, default)

    def set(self, section: str, key: str, value):
        """Set configuration value"""
        if not isinstance(self.config.get(section), dict):
            self.config[section] = {}
        self.config[section][key] = value

    def get_int(self, section: str, key: str, default: int = 0) -> int:
        """Integer setting, falling back to the default on values int() rejects"""
        value = self.get(section, key, default)
        try:
            return int(value or 0)
        except (TypeError, ValueError):
            logger.warning(f"Invalid {section}.{key} value {value!r}, using {default}")
            return default

    def get_head_size(self) -> int:
        """Leading bytes to read per file, never less than the rule table needs"""
        return max(self.get_int("detection", "head_size"), head_reach(RULE_TABLE))

    def get_tail_size(self) -> int:
        """Trailing bytes to read per file, never less than the rule table needs"""
        return max(self.get_int("detection", "tail_size"), tail_reach(RULE_TABLE))

    def get_libmagic_head_size(self) -> int:
        """Leading bytes handed to libmagic, which needs more context than the rule table"""
        return max(self.get_int("libmagic", "head_size", 1024 * 1024), self.get_head_size())

    def get_json_indent(self) -> int:
        return self.get_int("output", "json_indent", 2)

    def is_libmagic_enabled(self) -> bool:
        return bool(self.get("libmagic", "enabled", False))

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
