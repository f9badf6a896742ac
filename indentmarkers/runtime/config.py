"""Persistent JSON settings for indent markers.

Stores marker options, indent unit and terminal theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

from platformdirs import user_config_dir

from ..config import MARKER_TYPES, IndentMarkerConfig, combine_config

logger = logging.getLogger(__name__)

APP_NAME = "indentmarkers"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

_MARKER_KEY = "markers"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    location never breaks rendering.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_positive_int(value: object) -> int | None:
    """Accept strictly positive JSON integers; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _coerce_bool(value: object) -> bool | None:
    return value if isinstance(value, bool) else None


def sanitize_marker_settings(raw: object) -> dict[str, object]:
    """Drop unknown keys and invalid values from a persisted marker object."""
    if not isinstance(raw, dict):
        return {}

    clean: dict[str, object] = {}
    for key in ("highlight_active_block", "hide_first_indent"):
        flag = _coerce_bool(raw.get(key))
        if flag is not None:
            clean[key] = flag
    for key in ("thickness", "active_thickness", "indent_unit"):
        number = _coerce_positive_int(raw.get(key))
        if number is not None:
            clean[key] = number
    marker_type = raw.get("marker_type")
    if marker_type in MARKER_TYPES:
        clean["marker_type"] = marker_type
    colors = raw.get("colors")
    if isinstance(colors, dict):
        clean["colors"] = {key: value for key, value in colors.items() if isinstance(value, str)}
    return clean


def load_marker_config(**overrides: object) -> IndentMarkerConfig:
    """Return persisted marker settings, with non-``None`` ``overrides`` on top."""
    stored = sanitize_marker_settings(load_config().get(_MARKER_KEY))
    return combine_config(overrides, stored)


def save_marker_config(marker_config: IndentMarkerConfig) -> None:
    """Persist all marker settings, keeping unrelated config keys."""
    config = load_config()
    config[_MARKER_KEY] = asdict(marker_config)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)
