"""Stats log reading, writing and visualization exceptions."""

from .base import TTStatsException


class LogNotFoundError(TTStatsException):
    """Raised when a stats log file does not exist."""

    pass


class StatsReadError(TTStatsException):
    """Raised when a stats log exists but cannot be read."""

    pass


class StatsWriteError(TTStatsException):
    """Raised when a session or mistake row cannot be appended."""

    pass


class InsufficientDataError(TTStatsException):
    """Raised when there is not enough data to draw a progress chart."""

    def __init__(self, message: str, record_count: int | None = None):
        super().__init__(message)
        self.record_count = record_count
