"""Shell settings with JSON file loading and CLI overrides.

Two-level precedence: CLI overrides > ``settings.json`` in the config
directory. The config directory is ``$MSH_CONFIG_DIR`` or ``~/.msh``.
"""

from __future__ import annotations

import json
import logging
import os
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".msh"
SETTINGS_FILE_NAME = "settings.json"


# --- Settings schema ---


@dataclass
class EditorSettings:
    """Line editor limits."""

    max_line_length: int = 1000
    history_size: int = 200
    default_width: int = 80


@dataclass
class PromptSettings:
    """Prompt appearance."""

    color: bool = True
    symbol: str = "$"


def _settings_defaults() -> dict[str, Any]:
    """Default settings values."""
    return {
        "editor": {
            "maxLineLength": 1000,
            "historySize": 200,
            "defaultWidth": 80,
        },
        "prompt": {
            "color": True,
            "symbol": "$",
        },
    }


# --- Deep merge ---


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into base settings.

    For nested dicts, merge recursively. For everything else the override
    wins. ``None`` values in *overrides* are skipped.
    """
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_settings(result[key], value)
        else:
            result[key] = value
    return result


# --- SettingsManager ---


class SettingsManager:
    """Holds merged settings. Use :meth:`create` or :meth:`in_memory`."""

    def __init__(self, *, initial_settings: dict[str, Any]) -> None:
        self._file_settings = dict(initial_settings)
        self._settings = deep_merge_settings(_settings_defaults(), self._file_settings)

    # --- Factory methods ---

    @classmethod
    def create(cls, config_dir: str | None = None) -> SettingsManager:
        """Load settings from ``<config_dir>/settings.json``."""
        cdir = config_dir or default_config_dir()
        settings_path = os.path.join(cdir, SETTINGS_FILE_NAME)
        settings, error = _load_from_file(settings_path)
        if error is not None:
            logger.warning("Ignoring unreadable settings file %s: %s", settings_path, error)
        return cls(initial_settings=settings)

    @classmethod
    def in_memory(cls, settings: dict[str, Any] | None = None) -> SettingsManager:
        """Create a settings manager that never touches the filesystem."""
        return cls(initial_settings=settings or {})

    # --- Core operations ---

    def apply_overrides(self, overrides: dict[str, Any]) -> None:
        """Apply CLI-level overrides on top of the merged settings."""
        self._settings = deep_merge_settings(self._settings, overrides)

    @property
    def settings(self) -> dict[str, Any]:
        """Current merged settings (read-only view)."""
        return self._settings

    def get_file_settings(self) -> dict[str, Any]:
        """Get a deep copy of the settings as read from disk."""
        return deepcopy(self._file_settings)

    # --- Typed views ---

    def get_editor_settings(self) -> EditorSettings:
        editor = self._settings.get("editor") or {}
        defaults = EditorSettings()
        return EditorSettings(
            max_line_length=_at_least(
                "editor.maxLineLength", editor.get("maxLineLength"), 2, defaults.max_line_length
            ),
            history_size=_as_int(editor.get("historySize"), defaults.history_size),
            default_width=_at_least(
                "editor.defaultWidth", editor.get("defaultWidth"), 1, defaults.default_width
            ),
        )

    def get_prompt_settings(self) -> PromptSettings:
        prompt = self._settings.get("prompt") or {}
        defaults = PromptSettings()
        color = prompt.get("color")
        symbol = prompt.get("symbol")
        return PromptSettings(
            color=color if isinstance(color, bool) else defaults.color,
            symbol=symbol if isinstance(symbol, str) and symbol else defaults.symbol,
        )


# --- Helpers ---


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _at_least(key: str, value: Any, minimum: int, default: int) -> int:
    result = _as_int(value, default)
    if result < minimum:
        logger.warning(
            "Setting %s must be at least %d, got %d; using %d", key, minimum, result, default
        )
        return default
    return result


def _load_from_file(path: str) -> tuple[dict[str, Any], Exception | None]:
    """Load settings from a JSON file. Returns (settings, error)."""
    if not os.path.exists(path):
        return {}, None
    try:
        content = Path(path).read_text(encoding="utf-8")
        settings = json.loads(content)
    except (OSError, json.JSONDecodeError) as e:
        return {}, e
    if not isinstance(settings, dict):
        return {}, ValueError(f"expected a JSON object in {path}")
    return settings, None


def default_config_dir() -> str:
    """Default config directory (``$MSH_CONFIG_DIR`` or ``~/.msh``)."""
    env = os.environ.get("MSH_CONFIG_DIR")
    if env:
        return env
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
