"""CLI command for appending a session to the stats logs."""

import time

from tt_stats.cli.commands.common import load_config
from tt_stats.exceptions import StatsWriteError
from tt_stats.models import MistakeRecord
from tt_stats.presenters import ConsolePresenter
from tt_stats.services import StatsLogWriter, record_session_safely


def parse_mistake(value: str) -> MistakeRecord:
    """Parse a ``WORD:TYPED`` argument.

    Raises:
        ValueError: If the value has no ``:`` separator or an empty word
    """
    word, sep, typed = value.partition(":")
    if not sep or not word:
        raise ValueError(f"Invalid mistake {value!r}, expected WORD:TYPED")
    return MistakeRecord(word=word, typed=typed)


def record_command(args) -> int:
    """Execute the record subcommand.

    A failed session write does not stop the mistakes from being recorded;
    either failure makes the exit code non-zero.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        mistakes = [parse_mistake(m) for m in args.mistake]
    except ValueError as e:
        presenter.show_error(str(e))
        return 1

    config = load_config(args)
    writer = StatsLogWriter(config.results_dir)
    timestamp = args.timestamp if args.timestamp is not None else int(time.time())

    saved = record_session_safely(
        writer,
        args.test_type,
        timestamp,
        args.wpm,
        args.cpm,
        args.accuracy,
        source_file=args.source_file,
        session_length=args.length,
    )

    try:
        writer.record_mistakes(args.test_type, timestamp, mistakes)
    except StatsWriteError as e:
        presenter.show_error(str(e))
        return 1

    if not saved:
        presenter.show_error("Session result not saved")
        return 1

    presenter.show_success(f"Session recorded in {writer.stats_path(args.test_type)}")
    return 0
