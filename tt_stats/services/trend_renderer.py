"""Terminal chart of daily typing speed trends."""

import logging
from collections.abc import Sequence

import plotext as plt

from tt_stats.exceptions import InsufficientDataError
from tt_stats.interfaces import AcknowledgeCallback, PresenterProtocol
from tt_stats.models.stats import DailyBucket, TrendChart
from tt_stats.presenters import ConsolePresenter

logger = logging.getLogger(__name__)

# Labelling every bucket is only readable up to this many days
MAX_FULLY_LABELLED = 5

DATE_FORMAT = "%b %d"
SERIES_NAMES = ("Min WPM", "Mean WPM", "Max WPM")

ANSI_COLORS = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "reset": "\033[0m",
}


def plan_axis_labels(buckets: Sequence[DailyBucket]) -> tuple[list[int], list[str]]:
    """Choose which buckets get an x-axis date label.

    Up to five buckets are all labelled; beyond that only the first,
    middle and last, so the axis stays readable for long histories.

    Returns:
        (positions, labels) with one entry per labelled bucket
    """
    if len(buckets) <= MAX_FULLY_LABELLED:
        positions = list(range(len(buckets)))
    else:
        positions = [0, len(buckets) // 2, len(buckets) - 1]
    return positions, [buckets[i].day.strftime(DATE_FORMAT) for i in positions]


def format_caption(buckets: Sequence[DailyBucket]) -> str:
    first = buckets[0].day.strftime(DATE_FORMAT)
    last = buckets[-1].day.strftime(DATE_FORMAT)
    return f"Typing Speed Progress ({first} - {last})"


def format_legend(colors: Sequence[str]) -> str:
    """Legend line mapping each series color to its name."""
    reset = ANSI_COLORS["reset"]
    parts = [
        f"{ANSI_COLORS.get(color, '')}━━━{reset} {name}" for color, name in zip(colors, SERIES_NAMES)
    ]
    return "   " + "    ".join(parts)


class TrendRenderer:
    """Draw min/mean/max WPM per day as a three-series line chart.

    After printing the chart, legend and summary, the renderer calls the
    injected acknowledgment once so the chart stays on screen until the
    user is done with it.
    """

    def __init__(
        self,
        acknowledge: AcknowledgeCallback,
        height: int = 15,
        width: int = 60,
        colors: Sequence[str] = ("blue", "green", "red"),
        presenter: PresenterProtocol | None = None,
    ):
        """Initialize the renderer.

        Args:
            acknowledge: Blocking "press any key" step run after drawing
            height: Chart height in terminal rows
            width: Chart width in terminal columns
            colors: Colors for the min, mean and max series, in that order
            presenter: Output target (default: console)
        """
        if len(colors) != len(SERIES_NAMES):
            raise ValueError(f"Expected {len(SERIES_NAMES)} series colors, got {len(colors)}")
        self.acknowledge = acknowledge
        self.height = height
        self.width = width
        self.colors = tuple(colors)
        self.presenter = presenter or ConsolePresenter()

    def render(
        self, buckets: Sequence[DailyBucket], mean_accuracy: float | None = None
    ) -> TrendChart:
        """Render the chart, print it and wait for acknowledgment.

        Args:
            buckets: Daily buckets sorted by date, oldest first
            mean_accuracy: Optional average accuracy to include in the summary

        Returns:
            The chart that was displayed

        Raises:
            InsufficientDataError: If there are no buckets to draw
        """
        if not buckets:
            raise InsufficientDataError("no daily data to plot")

        chart = self.build_chart(buckets)

        self.presenter.show_info("")
        self.presenter.show_info(chart.text)
        self.presenter.show_info("")
        self.presenter.show_info(format_legend(self.colors))
        self.presenter.show_info("")
        self.presenter.show_info(
            f"{chart.total_samples} tests completed over {chart.day_count} days"
        )
        if mean_accuracy is not None:
            self.presenter.show_info(f"Average accuracy: {mean_accuracy:.2f}%")
        self.presenter.show_info("Press any key to exit")

        self.acknowledge()
        return chart

    def build_chart(self, buckets: Sequence[DailyBucket]) -> TrendChart:
        """Compute the series and label plan and draw the chart text."""
        chart = TrendChart(
            min_series=[b.min_wpm for b in buckets],
            mean_series=[b.mean_wpm for b in buckets],
            max_series=[b.max_wpm for b in buckets],
            caption=format_caption(buckets),
            total_samples=sum(b.sample_count for b in buckets),
            day_count=len(buckets),
        )
        positions, chart.labels = plan_axis_labels(buckets)
        chart.text = self._draw(chart, positions)
        logger.debug(f"Rendered chart for {chart.day_count} days")
        return chart

    def _draw(self, chart: TrendChart, positions: list[int]) -> str:
        xs = list(range(chart.day_count))
        series = (chart.min_series, chart.mean_series, chart.max_series)

        plt.clear_figure()
        plt.plotsize(self.width, self.height)
        plt.title(chart.caption)
        for values, color, name in zip(series, self.colors, SERIES_NAMES):
            plt.plot(xs, values, color=color, label=name)
        plt.xticks(positions, chart.labels)

        # Pad the axes so a single day or a flat line still has a visible range
        plt.xlim(-1, chart.day_count)
        low, high = min(chart.min_series), max(chart.max_series)
        if low == high:
            plt.ylim(low - 1, high + 1)

        return plt.build()
