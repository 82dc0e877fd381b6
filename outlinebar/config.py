"""Persistent JSON config helpers.

Stores the preferred tree style, glyph spacing, and UI theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "outlinebar"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks output.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_name(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_name(key: str, name: str) -> None:
    stripped = str(name).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_style_name() -> str | None:
    """Load persisted tree style name, returning ``None`` when unset/invalid."""
    return _load_name("style")


def save_style_name(style_name: str) -> None:
    _save_name("style", style_name)


def load_spacing() -> int | None:
    """Load persisted glyph spacing.

    Booleans, non-integers, and negative values are treated as unset.
    """
    value = load_config().get("spacing")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def save_spacing(spacing: int) -> None:
    if spacing < 0:
        return
    config = load_config()
    config["spacing"] = int(spacing)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_name("theme")


def save_theme_name(theme_name: str) -> None:
    _save_name("theme", theme_name)
