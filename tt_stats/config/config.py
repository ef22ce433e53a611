"""Configuration classes for tt stats."""

import os
from dataclasses import dataclass, field
from pathlib import Path


def default_data_dir() -> Path:
    """Get the data directory for tt.

    Resolution order:
    1. XDG_DATA_HOME/tt
    2. ~/.local/share/tt
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / "tt"
    return Path.home() / ".local" / "share" / "tt"


def default_config_path() -> Path:
    """Get the path of the JSON config file.

    Resolution order:
    1. XDG_CONFIG_HOME/tt/config.json
    2. ~/.config/tt/config.json
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "tt" / "config.json"
    return Path.home() / ".config" / "tt" / "config.json"


def default_results_dir() -> Path:
    """Directory holding the per-test-type CSV logs when no override is set."""
    return default_data_dir() / "results"


@dataclass(frozen=True)
class TTStatsConfig:
    """Immutable configuration passed into each stats component.

    Replaces process-wide directory variables: every service receives
    the directories and limits it needs from here.
    """

    # Storage settings
    results_dir: Path = field(default_factory=default_results_dir)

    # Visualization settings
    window_days: int = 30  # Trailing window for the progress chart
    chart_height: int = 15
    chart_width: int = 60
    timezone: str = ""  # IANA zone name for day buckets; empty = local time

    # Quote settings
    quote_api_url: str = "https://zenquotes.io/api/random"
    quote_timeout: float = 5.0  # Seconds
    quote_cache_size: int = 10

    def __post_init__(self):
        """Convert string paths to Path objects and expand ``~``."""
        results_dir = self.results_dir
        if isinstance(results_dir, str):
            results_dir = Path(results_dir)
        object.__setattr__(self, "results_dir", results_dir.expanduser())
