"""Configuration management for the Foldline viewer."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "foldline"
DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "settings" / "defaults.yaml"
USER_SETTINGS_PATH = CONFIG_DIR / "settings.yaml"

DEFAULT_ZOOM_BOUNDS = (10.0, 32.0)
FALSE_STRINGS = {"", "0", "false", "no", "off"}


class ConfigManager:
    """Loads default and user configuration and provides helpers to query values."""

    def __init__(self) -> None:
        self.defaults = self._load_yaml(DEFAULTS_PATH)
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        if USER_SETTINGS_PATH.exists():
            self.user_settings = self._load_yaml(USER_SETTINGS_PATH)
        else:
            self.user_settings = {}
        self.settings = self._deep_merge(self.defaults, self.user_settings)

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    def get(self, key: str, default: Any | None = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def section(self, key: str) -> dict[str, Any]:
        """Return a nested settings mapping, or an empty dict when absent or malformed."""

        value = self.settings.get(key)
        return value if isinstance(value, dict) else {}

    def save(self) -> None:
        USER_SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with USER_SETTINGS_PATH.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(self.settings, handle)

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged: dict[str, Any] = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def zoom_bounds(self) -> tuple[float, float]:
        """Return the ``(minimum, maximum)`` font scale allowed by the zoom controller.

        Swapped or non-numeric values fall back to the built-in bounds.
        """

        zoom_cfg = self.section("zoom")
        try:
            minimum = float(zoom_cfg.get("minimum", DEFAULT_ZOOM_BOUNDS[0]))
            maximum = float(zoom_cfg.get("maximum", DEFAULT_ZOOM_BOUNDS[1]))
        except (TypeError, ValueError):
            return DEFAULT_ZOOM_BOUNDS
        if minimum > maximum:
            return DEFAULT_ZOOM_BOUNDS
        return minimum, maximum

    def initial_font_scale(self) -> float:
        try:
            return float(self.section("viewer").get("font_size", 14))
        except (TypeError, ValueError):
            return 14.0

    def folding_enabled(self) -> bool:
        """Flag for computing fold ranges in source viewers."""

        value = self.section("folding").get("enabled", True)
        if isinstance(value, str):
            return value.strip().lower() not in FALSE_STRINGS
        return bool(value)

    def comment_prefixes(self) -> tuple[str, ...] | None:
        prefixes = self.section("folding").get("comment_prefixes")
        if not isinstance(prefixes, list):
            return None
        return tuple(str(prefix) for prefix in prefixes if prefix)
