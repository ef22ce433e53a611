"""Business logic services for tt stats."""

from .aggregation_service import DailyAggregator, resolve_timezone, summarize_accuracy
from .quote_service import FALLBACK_QUOTE, QuoteService
from .stats_log_reader import StatsLogReader
from .stats_log_writer import StatsLogWriter, record_session_safely
from .trend_renderer import TrendRenderer, plan_axis_labels

__all__ = [
    "StatsLogWriter",
    "record_session_safely",
    "StatsLogReader",
    "DailyAggregator",
    "resolve_timezone",
    "summarize_accuracy",
    "TrendRenderer",
    "plan_axis_labels",
    "QuoteService",
    "FALLBACK_QUOTE",
]
