"""Quote provider exceptions."""

from .base import TTStatsException


class QuoteFetchError(TTStatsException):
    """Raised when a quote cannot be fetched from the remote API."""

    pass
