"""Settings loading."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from baybayin.errors import ConfigError


# Root directory
ROOT_DIR = Path(__file__).parent.parent

DEFAULT_SETTINGS_PATH = ROOT_DIR / "etc" / "settings.yaml"

ENDPOINT_ENV_VAR = "BAYBAYIN_TRANSLATE_ENDPOINT"

DEFAULT_SETTINGS: dict[str, Any] = {
    "defaults": {
        "font": "Baybayin Simple",
        "canceller": "+",
    },
    "logging": {
        "level": "INFO",
        "format": "pretty",
        "file": None,
    },
    "translate": {
        "endpoint": "http://localhost:3000/api/translate",
        "timeout": 30,
        "max_retries": 2,
        "backoff_start": 1.0,
        "backoff_max": 10.0,
    },
    "batch": {
        "column": "text",
    },
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """
    Load settings.yaml over the built-in defaults.

    Args:
        path: Settings file (default: etc/settings.yaml; missing file is fine)

    Returns:
        Settings dictionary

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    settings_path = Path(path) if path else DEFAULT_SETTINGS_PATH

    if path and not settings_path.exists():
        raise ConfigError(f"Settings file not found: {settings_path}")

    loaded: Any = {}
    if settings_path.exists():
        try:
            with settings_path.open(encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {settings_path}: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigError(f"Settings must be a mapping, got {type(loaded).__name__}")

    settings = _merge(DEFAULT_SETTINGS, loaded)

    endpoint = os.environ.get(ENDPOINT_ENV_VAR)
    if endpoint:
        settings["translate"]["endpoint"] = endpoint

    return settings
