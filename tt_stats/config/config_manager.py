"""JSON configuration persistence manager."""

import json
import logging
from pathlib import Path
from typing import Any

from .config import TTStatsConfig, default_config_path
from .defaults import create_default_config

logger = logging.getLogger(__name__)

# JSON key -> (TTStatsConfig field, expected type)
_CONFIG_KEYS: dict[str, tuple[str, type]] = {
    "csvdir": ("results_dir", str),
    "window_days": ("window_days", int),
    "chart_height": ("chart_height", int),
    "chart_width": ("chart_width", int),
    "timezone": ("timezone", str),
}


class ConfigManager:
    """Manager for the tt stats JSON configuration file.

    Loads the results-directory override and visualization options from
    ``config.json``. A missing or invalid file falls back to defaults so the
    typing session is never blocked by configuration problems.
    """

    @classmethod
    def load_config(cls, path: Path | None = None) -> TTStatsConfig:
        """Load configuration from a JSON file.

        Args:
            path: Config file path (default: XDG config location)

        Returns:
            Loaded configuration, or default configuration if the file doesn't
            exist or is invalid
        """
        config_path = path or default_config_path()
        if not config_path.exists():
            return create_default_config()

        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            return create_default_config(**cls._to_overrides(data))

        except (OSError, json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file {config_path}, using defaults: {e}")
            return create_default_config()

    @classmethod
    def save_config(cls, config: TTStatsConfig, path: Path | None = None) -> None:
        """Save configuration to a JSON file.

        Args:
            config: Configuration to save
            path: Config file path (default: XDG config location)

        Raises:
            OSError: If unable to create directory or write file
        """
        config_path = path or default_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            key: str(getattr(config, attr)) if attr == "results_dir" else getattr(config, attr)
            for key, (attr, _) in _CONFIG_KEYS.items()
        }
        with config_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def _to_overrides(data: dict[str, Any]) -> dict[str, Any]:
        """Map recognised JSON keys to config overrides, validating types."""
        overrides: dict[str, Any] = {}
        for key, (attr, expected) in _CONFIG_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            # bool is an int subclass; reject it for numeric settings
            if not isinstance(value, expected) or isinstance(value, bool):
                raise TypeError(f"{key} must be of type {expected.__name__}")
            if key == "csvdir" and not value:
                continue
            overrides[attr] = value
        return overrides
