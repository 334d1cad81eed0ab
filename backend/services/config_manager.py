"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from .sequence_differ import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def is_valid_timeout(value: Any) -> bool:
    """A diff time budget is a non-negative number (0 disables it)"""
    return not isinstance(value, bool) and isinstance(value, (int, float)) and value >= 0


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # 1st: environment variable, 2nd: ~/.diffview
        config_dir = os.environ.get("DIFFVIEW_CONFIG_DIR") or os.path.expanduser("~/.diffview")

        try:
            config_path = Path(config_dir)
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("Cannot write to %s: %s", config_dir, e)
            self._config_file = None

        # Last resort: temp dir
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "diffview"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.warning("Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file) as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Error loading config %s: %s", self._config_file, e)
            return self._default_config()

        if not isinstance(loaded, dict):
            logger.warning("Ignoring config %s: not a JSON object", self._config_file)
            return self._default_config()

        config = self._default_config()
        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": {"timeout": DEFAULT_TIMEOUT},
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def get_diff_settings(self) -> dict[str, Any]:
        """Get the "diff" section with defaults filled in and bad values replaced"""
        settings = self.get_config().get("diff")
        if not isinstance(settings, dict):
            logger.warning("Ignoring diff settings %r: not an object", settings)
            return self._default_config()["diff"]

        settings = dict(settings)
        if not is_valid_timeout(settings.get("timeout", DEFAULT_TIMEOUT)):
            logger.warning(
                "Invalid diff timeout %r in %s, using %s",
                settings["timeout"],
                self._config_file,
                DEFAULT_TIMEOUT,
            )
            settings["timeout"] = DEFAULT_TIMEOUT
        return settings

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)

        try:
            self._config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)
