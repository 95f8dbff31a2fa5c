"""Persistent JSON config helpers.

Stores default depth, theme, color and filter preferences for the CLI.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LEGACY_CONFIG_PATH = Path.home() / ".config" / "lazytree.json"
CONFIG_PATH = DEFAULT_CONFIG_PATH


def _load_config_path() -> Path:
    """Return preferred config path, falling back to legacy location when needed."""
    if CONFIG_PATH.exists():
        return CONFIG_PATH
    if CONFIG_PATH == DEFAULT_CONFIG_PATH and LEGACY_CONFIG_PATH.exists():
        return LEGACY_CONFIG_PATH
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = _load_config_path()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored; an unwritable config
    never aborts a render.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_bool(key: str) -> bool | None:
    value = load_config().get(key)
    return value if isinstance(value, bool) else None


def load_default_depth() -> int | None:
    """Return persisted default depth, or ``None`` when unset or not a non-negative int."""
    value = load_config().get("max_depth")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_no_color() -> bool:
    """Return whether color output is disabled by config."""
    return _load_bool("no_color") is True


def load_show_gitkeep() -> bool:
    """Return whether ``.gitkeep`` markers should be listed."""
    return _load_bool("show_gitkeep") is True


def load_respect_gitignore() -> bool:
    """Return whether gitignored paths are hidden; defaults to ``True``."""
    return _load_bool("respect_gitignore") is not False


def save_defaults(
    *,
    max_depth: int,
    theme_name: str | None,
    no_color: bool,
    show_gitkeep: bool,
    respect_gitignore: bool,
) -> None:
    """Persist CLI defaults, keeping unrelated keys already in the config."""
    config = load_config()
    config["max_depth"] = int(max_depth)
    if theme_name:
        config["theme"] = str(theme_name).strip()
    config["no_color"] = bool(no_color)
    config["show_gitkeep"] = bool(show_gitkeep)
    config["respect_gitignore"] = bool(respect_gitignore)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "LEGACY_CONFIG_PATH",
    "load_config",
    "save_config",
    "load_default_depth",
    "load_theme_name",
    "load_no_color",
    "load_show_gitkeep",
    "load_respect_gitignore",
    "save_defaults",
]
