"""Configuration management for tt stats."""

from .config import TTStatsConfig, default_config_path, default_data_dir, default_results_dir
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = [
    "TTStatsConfig",
    "ConfigManager",
    "create_default_config",
    "default_config_path",
    "default_data_dir",
    "default_results_dir",
]
