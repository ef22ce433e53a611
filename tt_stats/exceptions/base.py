"""Base exception classes for tt stats."""


class TTStatsException(Exception):
    """Base exception for all tt stats errors.

    All custom exceptions in the tt_stats package should inherit
    from this base class for consistent error handling.
    """

    pass
