"""Orchestrator for the read -> aggregate -> render progress pipeline."""

import logging

from tt_stats.config import TTStatsConfig
from tt_stats.exceptions import InsufficientDataError, LogNotFoundError
from tt_stats.interfaces import PresenterProtocol
from tt_stats.models import TrendChart
from tt_stats.services import (
    DailyAggregator,
    StatsLogReader,
    TrendRenderer,
    summarize_accuracy,
)
from tt_stats.utils.file_utils import resolve_log_path

logger = logging.getLogger(__name__)

MIN_RECORDS = 2


class VisualizeProcessor:
    """Show the progress chart for one stats log.

    A linear one-shot pipeline: the first stage that fails raises, and
    nothing after it runs.
    """

    def __init__(
        self,
        config: TTStatsConfig,
        reader: StatsLogReader,
        aggregator: DailyAggregator,
        renderer: TrendRenderer,
        presenter: PresenterProtocol,
    ):
        """Initialize the visualize processor.

        Args:
            config: Configuration (results directory, window size)
            reader: Stats log reader
            aggregator: Daily bucket aggregator
            renderer: Chart renderer
            presenter: Output presenter, used for skipped-row warnings
        """
        self.config = config
        self.reader = reader
        self.aggregator = aggregator
        self.renderer = renderer
        self.presenter = presenter

    def visualize(self, path_or_name: str) -> TrendChart:
        """Read, aggregate and render the stats log at ``path_or_name``.

        Args:
            path_or_name: A bare filename in the results directory, or a path

        Returns:
            The chart that was displayed

        Raises:
            LogNotFoundError: If the log file does not exist
            StatsReadError: If the log file cannot be read
            InsufficientDataError: If there are fewer than two records, or
                none inside the trailing window
        """
        path = resolve_log_path(path_or_name, self.config.results_dir)
        if not path.exists():
            raise LogNotFoundError(
                f"CSV file not found at {path}\nRun tests with the -csv flag first to generate data"
            )

        result = self.reader.read_records(path)
        for warning in result.warnings:
            self.presenter.show_warning(warning)

        count = result.record_count
        if count == 0:
            raise InsufficientDataError(
                "no test data found in CSV file\nRun some tests with -csv flag to collect data",
                record_count=0,
            )
        if count < MIN_RECORDS:
            raise InsufficientDataError(
                f"need at least {MIN_RECORDS} tests to visualize progress\nCurrent: {count} test",
                record_count=count,
            )

        window = self.config.window_days
        recent = self.aggregator.recent_records(result.records, window)
        buckets = self.aggregator.bucket_by_day(recent)
        if not buckets:
            raise InsufficientDataError(f"no data found in the last {window} days", record_count=count)

        logger.info(f"Visualizing {len(recent)} records across {len(buckets)} days from {path}")
        return self.renderer.render(buckets, mean_accuracy=summarize_accuracy(recent))
