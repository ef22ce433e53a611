"""Data models for tt stats."""

from .quote import Quote
from .stats import DailyBucket, MistakeRecord, ReadResult, StatsRecord, TrendChart

__all__ = [
    "StatsRecord",
    "MistakeRecord",
    "DailyBucket",
    "ReadResult",
    "TrendChart",
    "Quote",
]
