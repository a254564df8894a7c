"""
Configuration Manager - Persist user defaults for rendering and publishing
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self, config_dir: str | None = None):
        # 1st: explicit directory, then environment variable
        config_dir = config_dir or os.environ.get("DIFF2HTML_CONFIG_DIR")

        # 2nd: home directory ~/.diff2html
        if not config_dir:
            config_dir = os.path.expanduser("~/.diff2html")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
            self._config_file = None

        # 3rd: temp directory
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "diff2html"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, stored values override the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return config

        if isinstance(stored, dict):
            config.update(stored)
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration, keys match the command-line options"""
        return {
            "style": "line",
            "file_content_toggle": True,
            "synchronised_scroll": True,
            "highlight_code": True,
            "color_scheme": "auto",
            "summary": "closed",
            "diff_style": "word",
            "diff_max_changes": None,
            "diff_max_line_length": None,
            "max_line_length_highlight": 10000,
            "render_nothing_when_empty": False,
            "format": "html",
            "input": "command",
            "output": "preview",
            "html_wrapper_template": None,
            "ignore": [],
            "server": {"host": "127.0.0.1", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)
