"""Helpers shared by CLI commands."""

from pathlib import Path

from tt_stats.config import ConfigManager, TTStatsConfig


def load_config(args) -> TTStatsConfig:
    """Load configuration from ``--config`` or the default location."""
    config_path = Path(args.config).expanduser() if getattr(args, "config", None) else None
    return ConfigManager.load_config(config_path)
