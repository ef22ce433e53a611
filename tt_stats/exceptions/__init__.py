"""Custom exceptions for tt stats."""

from .base import TTStatsException
from .quotes import QuoteFetchError
from .stats_log import InsufficientDataError, LogNotFoundError, StatsReadError, StatsWriteError

__all__ = [
    "TTStatsException",
    "LogNotFoundError",
    "StatsReadError",
    "StatsWriteError",
    "InsufficientDataError",
    "QuoteFetchError",
]
