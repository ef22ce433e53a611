"""Default configuration values for tt stats."""

from .config import TTStatsConfig


def create_default_config(**overrides) -> TTStatsConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        TTStatsConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            window_days=7,
            timezone="UTC"
        )
    """
    return TTStatsConfig(**overrides)
