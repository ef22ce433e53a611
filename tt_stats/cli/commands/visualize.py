"""CLI command for charting typing progress."""

from dataclasses import replace

from tt_stats.cli.commands.common import load_config
from tt_stats.exceptions import TTStatsException
from tt_stats.orchestration import VisualizeProcessor
from tt_stats.presenters import ConsoleAcknowledge, ConsolePresenter
from tt_stats.services import DailyAggregator, StatsLogReader, TrendRenderer, resolve_timezone


def visualize_command(args) -> int:
    """Execute the visualize subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    config = load_config(args)
    if args.days is not None:
        if args.days < 0:
            presenter.show_error("--days must not be negative")
            return 1
        config = replace(config, window_days=args.days)

    try:
        tz = resolve_timezone(config.timezone)
    except ValueError as e:
        presenter.show_error(str(e))
        return 1

    processor = VisualizeProcessor(
        config=config,
        reader=StatsLogReader(),
        aggregator=DailyAggregator(tz=tz),
        renderer=TrendRenderer(
            acknowledge=ConsoleAcknowledge(),
            height=config.chart_height,
            width=config.chart_width,
            presenter=presenter,
        ),
        presenter=presenter,
    )

    try:
        processor.visualize(args.file)
        return 0
    except TTStatsException as e:
        presenter.show_error(str(e))
        return 1
