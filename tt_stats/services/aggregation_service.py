"""Group typing session records into daily WPM buckets."""

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

from tt_stats.models.stats import DailyBucket, StatsRecord

logger = logging.getLogger(__name__)


def resolve_timezone(name: str) -> tzinfo | None:
    """Resolve a configured zone name.

    Args:
        name: IANA zone name such as "UTC" or "Europe/Berlin"; empty for local time

    Returns:
        The zone, or None for the machine's local zone

    Raises:
        ValueError: If the zone name is unknown
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name}") from e


class DailyAggregator:
    """Bucket session records by calendar day inside a trailing window.

    Day boundaries are taken in a single zone (``tz``, or local time when
    None), used for both "now" and the record dates so buckets near
    midnight are consistent.
    """

    def __init__(
        self,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the aggregator.

        Args:
            tz: Zone used for day boundaries (None = local time)
            clock: Returns the current time; injectable for tests
        """
        self.tz = tz
        self._clock = clock or (lambda: datetime.now(self.tz).astimezone(self.tz))

    def day_of(self, timestamp: int) -> date:
        """Calendar day of an epoch timestamp in the aggregator's zone.

        Raises:
            OverflowError, OSError, ValueError: If the timestamp is outside
                the platform's representable range
        """
        return datetime.fromtimestamp(timestamp, self.tz).date()

    def has_day(self, timestamp: int) -> bool:
        """Whether ``timestamp`` falls on a representable calendar day."""
        try:
            self.day_of(timestamp)
        except (OverflowError, OSError, ValueError):
            return False
        return True

    def recent_records(self, records: Iterable[StatsRecord], window_days: int) -> list[StatsRecord]:
        """Records not older than ``now - window_days``, in input order.

        A record exactly at the cutoff is kept. Records whose timestamp has no
        representable calendar day are dropped, as they can never be bucketed.

        Raises:
            ValueError: If window_days is negative
        """
        if window_days < 0:
            raise ValueError(f"window_days must be >= 0, got {window_days}")

        cutoff = (self._clock() - timedelta(days=window_days)).timestamp()
        return [r for r in records if r.timestamp >= cutoff and self.has_day(r.timestamp)]

    def bucket_by_day(self, records: Iterable[StatsRecord]) -> list[DailyBucket]:
        """Compute min/mean/max WPM per calendar day, oldest day first."""
        by_day: dict[date, list[int]] = defaultdict(list)
        for record in records:
            try:
                day = self.day_of(record.timestamp)
            except (OverflowError, OSError, ValueError):
                logger.debug(f"Ignoring record with unrepresentable timestamp {record.timestamp}")
                continue
            by_day[day].append(record.wpm)

        buckets = [
            DailyBucket(
                day=day,
                min_wpm=float(min(values)),
                mean_wpm=sum(values) / len(values),
                max_wpm=float(max(values)),
                sample_count=len(values),
            )
            for day, values in by_day.items()
        ]
        buckets.sort(key=lambda b: b.day)
        return buckets

    def aggregate(self, records: Iterable[StatsRecord], window_days: int) -> list[DailyBucket]:
        """Compute min/mean/max WPM per day for recent records.

        Records strictly older than ``now - window_days`` are ignored. Days
        without records produce no bucket.

        Args:
            records: Session records in any order
            window_days: Size of the trailing window in days

        Returns:
            Buckets sorted by date, oldest first (empty if nothing qualifies)

        Raises:
            ValueError: If window_days is negative
        """
        buckets = self.bucket_by_day(self.recent_records(records, window_days))
        logger.debug(f"Aggregated records into {len(buckets)} daily buckets")
        return buckets


def summarize_accuracy(records: Iterable[StatsRecord]) -> float:
    """Mean accuracy over a set of records (0.0 when empty)."""
    values = [r.accuracy for r in records]
    if not values:
        return 0.0
    return sum(values) / len(values)
